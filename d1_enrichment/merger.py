"""
Record Merger

Joins raw catalog records with resolved billing accounts into
ServiceInventory records. Records are merged on a worker pool; output keeps
input order and length.
"""

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from core.logging import get_logger

from .config import EnrichmentConfig
from .models import Address, BillingAccountRef, Product, ResolvedAccountPair, ServiceInventory

logger = get_logger("enrichment.merger", domain="d1")


class RecordMerger:
    def __init__(self, config: EnrichmentConfig):
        self.config = config

    def merge(self, records: Sequence[Product], mapping: Mapping[str, ResolvedAccountPair]) -> list[ServiceInventory]:
        """Merge every record; the mapping is only read"""
        if not records:
            return []

        workers = min(self.config.worker_count, len(records))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="merge") as executor:
            merged = list(executor.map(lambda record: self.merge_one(record, mapping), records))

        logger.debug(f"Merged {len(merged)} record(s) on {workers} worker(s)")
        return merged

    def merge_one(self, record: Product, mapping: Mapping[str, ResolvedAccountPair]) -> ServiceInventory:
        inventory = ServiceInventory(
            serviceId=record.id,
            serviceType=self.config.service_type_label,
            status=record.status,
        )

        if record.product_characteristic is not None:
            inventory.product_characteristic = [
                characteristic
                for characteristic in record.product_characteristic
                if characteristic.name in self.config.valid_attributes
            ]

        party = record.customer_party()
        if party is not None and party.id:
            pair = mapping.get(party.id)
            if pair is not None and pair.display_id:
                inventory.billing_account = BillingAccountRef(id=pair.display_id)
                inventory.customer_number = pair.customer_number or None

        site_id = record.site_id()
        if site_id:
            inventory.location = Address(masterSiteid=site_id)

        return inventory
