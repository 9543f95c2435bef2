"""
Provider-specific API clients for D0 Gateway
"""

from .account import AccountClient
from .catalog import CatalogClient
from .location import LocationClient

__all__ = [
    "CatalogClient",
    "AccountClient",
    "LocationClient",
]
