"""
Base API client with common functionality for all upstream API providers
"""

import time
from abc import ABC, abstractmethod
from typing import Any

import httpx

from core.config import get_settings
from core.exceptions import ConfigurationError
from core.logging import get_logger

from .exceptions import (
    APIProviderError,
    AuthenticationError,
    InvalidResponseError,
    ServiceUnavailableError,
    UpstreamTimeoutError,
)
from .metrics import GatewayMetrics


class BaseAPIClient(ABC):
    """Abstract base class for all upstream API clients"""

    def __init__(
        self,
        provider: str,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.provider = provider
        self.settings = get_settings()
        self.logger = get_logger(f"gateway.{provider}", domain="d0")

        self.base_url = base_url or self._get_base_url()
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError(f"No base URL configured for {provider}", setting=f"{provider}_base_url")
        self.timeout = timeout or self.settings.request_timeout
        self.metrics = GatewayMetrics()

        # Each call is bounded by this timeout; a slow upstream fails that call only
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    @abstractmethod
    def _get_base_url(self) -> str:
        """Get the base URL for this provider"""

    @abstractmethod
    def _get_headers(self) -> dict[str, str]:
        """Get authentication headers for this provider"""

    async def make_request(self, method: str, endpoint: str, **kwargs) -> Any:
        """
        Make an authenticated API request

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional arguments passed to httpx

        Returns:
            Parsed JSON body, or None when the upstream returned an empty body

        Raises:
            UpstreamTimeoutError: When the call exceeds the client timeout
            ServiceUnavailableError: When the upstream cannot be reached
            APIProviderError: When the upstream returns a non-2xx status
            InvalidResponseError: When the body is not valid JSON
        """
        url = f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        headers = {**self._get_headers(), **kwargs.pop("headers", {})}
        kwargs.setdefault("timeout", self.timeout)

        start_time = time.time()
        response = None

        try:
            response = await self.client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            self.metrics.record_error(self.provider, endpoint, "timeout")
            self.logger.warning(f"{method} {endpoint} timed out after {self.timeout}s")
            raise UpstreamTimeoutError(self.provider, self.timeout) from e
        except httpx.HTTPError as e:
            self.metrics.record_error(self.provider, endpoint, "transport")
            self.logger.warning(f"{method} {endpoint} failed: {e}")
            raise ServiceUnavailableError(self.provider, str(e) or e.__class__.__name__) from e
        finally:
            self.metrics.record_api_call(
                provider=self.provider,
                endpoint=endpoint,
                status_code=response.status_code if response is not None else 0,
                duration=time.time() - start_time,
            )

        if response.status_code >= 400:
            self.metrics.record_error(self.provider, endpoint, f"http_{response.status_code}")
            self.logger.warning(f"{method} {endpoint} returned HTTP {response.status_code}")
            raise self._error_from_response(response)

        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            self.metrics.record_error(self.provider, endpoint, "invalid_json")
            raise InvalidResponseError(self.provider, "JSON", response.text[:500]) from e

    def _error_from_response(self, response: httpx.Response) -> APIProviderError:
        """Translate a non-2xx response into a gateway error"""
        if response.status_code in (401, 403):
            return AuthenticationError(self.provider, f"HTTP {response.status_code}")

        error_msg = f"HTTP {response.status_code}"
        try:
            error_data = response.json()
            if isinstance(error_data, dict):
                error_msg = error_data.get("message", error_msg)
        except ValueError:
            error_msg = response.text or error_msg

        return APIProviderError(
            provider=self.provider,
            message=error_msg,
            status_code=response.status_code,
            response_data={"body": response.text[:500]},
        )
