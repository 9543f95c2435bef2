"""
Shared fixtures for all tests
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import httpx
import pytest

from core.config import get_settings


def product_payload(
    product_id: str,
    ban: str | None = None,
    site_id: str | None = None,
    characteristics: dict | None = None,
    status: str = "Active",
    role_key: str = "referredType",
    role: str = "Customer",
) -> dict:
    """Raw catalog record as the catalog sends it"""
    payload = {"id": product_id, "name": f"Internet {product_id}", "status": status}
    if characteristics is not None:
        payload["productCharacteristic"] = [
            {"name": name, "valueType": "string", "value": value} for name, value in characteristics.items()
        ]
    if ban is not None:
        payload["relatedParty"] = [{"id": ban, "name": "ACME", role_key: role}]
    if site_id is not None:
        payload["place"] = [{"id": site_id, "role": "ServiceLocation"}]
    return payload


def site_location_payload(site_id: str, city: str = "Denver") -> dict:
    """Site location entry in the location service's PascalCase shape"""
    return {
        "MasterSiteId": site_id,
        "Description": "100 MAIN ST DENVER CO",
        "USZip4": "80202-1234",
        "AddressLine1": {"AddressBlock1": "100 Main St"},
        "Addresses": [
            {
                "AddressBlock1": "100 Main St",
                "AddressBlock2": "Suite 4",
                "City": city,
                "StateCode": "CO",
                "PostalCode": "80202",
                "PostalCodeExtension": "1234",
                "Country": "USA",
                "Locality": "Downtown",
            }
        ],
        "Building": {"BuildingName": "Main Tower"},
    }


@pytest.fixture
def make_product():
    return product_payload


@pytest.fixture
def make_site_location():
    return site_location_payload


@pytest.fixture
def settings():
    """Fresh settings for the test environment"""
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def mock_transport_client():
    """Build an httpx.AsyncClient whose requests go to ``handler``"""

    def _build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build
