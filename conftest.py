"""
Root conftest.py for pytest configuration

This file handles:
1. Test environment variables, set before any application module is imported
2. Marker registration
3. Automatic marker inheritance based on test location
"""
import os

import pytest

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("TOKEN_VALIDATION_ENABLED", "true")

PRIMARY_MARKERS = {
    "unit": "Fast isolated tests",
    "integration": "Tests that wire several domains together",
}

DOMAIN_MARKERS = {
    "core": "Configuration, logging, errors and middleware tests",
    "d0_gateway": "Upstream API client tests",
    "d1_enrichment": "Account and location enrichment tests",
    "d2_inventory": "Inventory query and API tests",
}


def pytest_configure(config):
    """Register primary and domain markers"""
    for marker_name, description in {**PRIMARY_MARKERS, **DOMAIN_MARKERS}.items():
        config.addinivalue_line("markers", f"{marker_name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Apply primary and domain markers from each test's location"""
    for item in items:
        test_path = str(item.fspath)
        existing_markers = {mark.name for mark in item.iter_markers()}

        if not existing_markers & set(PRIMARY_MARKERS):
            if "/unit/" in test_path:
                item.add_marker(pytest.mark.unit)
            elif "/integration/" in test_path:
                item.add_marker(pytest.mark.integration)

        for domain in DOMAIN_MARKERS:
            if f"/{domain}/" in test_path and domain not in existing_markers:
                item.add_marker(getattr(pytest.mark, domain))
