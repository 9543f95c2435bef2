"""
Factory for creating D0 Gateway API clients
"""
import threading
from typing import Dict, Optional, Type

from core.logging import get_logger

from .base import BaseAPIClient
from .providers.account import AccountClient
from .providers.catalog import CatalogClient
from .providers.location import LocationClient


class GatewayClientFactory:
    """Thread-safe factory for creating upstream API clients"""

    _instance = None
    _lock = threading.Lock()
    _initialized = False

    def __new__(cls):
        """Implement thread-safe singleton pattern"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self.logger = get_logger("gateway.factory", domain="d0")

                    # Registry of available providers
                    self._providers: Dict[str, Type[BaseAPIClient]] = {
                        "catalog": CatalogClient,
                        "account": AccountClient,
                        "location": LocationClient,
                    }

                    # Cache for created instances
                    self._client_cache: Dict[str, BaseAPIClient] = {}
                    self._cache_lock = threading.Lock()

                    self.__class__._initialized = True
                    self.logger.info("Gateway client factory initialized")

    def create_client(self, provider: str) -> BaseAPIClient:
        """
        Get the shared client for a provider, creating it on first use

        Args:
            provider: Provider name (catalog, account, location)

        Raises:
            ValueError: If provider is not registered
        """
        if provider not in self._providers:
            available = ", ".join(self._providers.keys())
            raise ValueError(f"Unknown provider '{provider}'. Available: {available}")

        with self._cache_lock:
            client = self._client_cache.get(provider)
            if client is None:
                client = self._client_cache[provider] = self._providers[provider]()
                self.logger.info(f"Created new client for {provider}")
        return client

    async def aclose_all(self) -> None:
        """Close every cached client and empty the cache"""
        with self._cache_lock:
            clients = list(self._client_cache.items())
            self._client_cache.clear()

        for provider, client in clients:
            await client.aclose()
            self.logger.info(f"Closed client for {provider}")


# Global factory instance
_factory_instance: Optional[GatewayClientFactory] = None


def get_gateway_factory() -> GatewayClientFactory:
    """Get the global gateway factory instance"""
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = GatewayClientFactory()
    return _factory_instance


def get_catalog_client() -> CatalogClient:
    return get_gateway_factory().create_client("catalog")


def get_account_client() -> AccountClient:
    return get_gateway_factory().create_client("account")


def get_location_client() -> LocationClient:
    return get_gateway_factory().create_client("location")
