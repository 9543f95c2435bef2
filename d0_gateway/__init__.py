"""
D0 Gateway - Clients for every upstream API

Catalog, account and location lookups all go through this gateway.
No other domain makes direct external calls.
"""

from .base import BaseAPIClient
from .exceptions import (
    APIProviderError,
    AuthenticationError,
    InvalidResponseError,
    ServiceUnavailableError,
    UpstreamTimeoutError,
)
from .factory import GatewayClientFactory, get_gateway_factory
from .metrics import GatewayMetrics
from .providers import AccountClient, CatalogClient, LocationClient

__all__ = [
    "BaseAPIClient",
    "GatewayClientFactory",
    "get_gateway_factory",
    "GatewayMetrics",
    "CatalogClient",
    "AccountClient",
    "LocationClient",
    # Exceptions
    "APIProviderError",
    "AuthenticationError",
    "ServiceUnavailableError",
    "InvalidResponseError",
    "UpstreamTimeoutError",
]
