"""
D1 Enrichment - Billing account and location enrichment of catalog records

Key extraction, bounded concurrent account resolution, order-preserving
merge and best-effort location enrichment.
"""

from .account_resolver import AccountResolver
from .config import EnrichmentConfig
from .keys import extract_account_keys
from .location_enricher import LocationEnricher
from .merger import RecordMerger
from .models import (
    EMPTY_PAIR,
    Address,
    BillingAccountRef,
    PartyRole,
    PlaceRef,
    Product,
    ProductCharacteristic,
    RelatedParty,
    ResolvedAccountPair,
    ServiceInventory,
    SiteLocation,
)

__all__ = [
    "AccountResolver",
    "EnrichmentConfig",
    "extract_account_keys",
    "LocationEnricher",
    "RecordMerger",
    # Models
    "EMPTY_PAIR",
    "Address",
    "BillingAccountRef",
    "PartyRole",
    "PlaceRef",
    "Product",
    "ProductCharacteristic",
    "RelatedParty",
    "ResolvedAccountPair",
    "ServiceInventory",
    "SiteLocation",
]
