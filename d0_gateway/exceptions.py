"""
Gateway-specific exceptions
"""
from core.exceptions import InventoryServiceError


class APIProviderError(InventoryServiceError):
    """Error from upstream API provider"""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int = None,
        response_data: dict = None,
    ):
        self.provider = provider
        self.upstream_message = message
        self.response_data = response_data
        super().__init__(
            message=f"{provider}: {message}",
            details={"provider": provider, "api_status_code": status_code},
            status_code=status_code or 502,
        )


class AuthenticationError(APIProviderError):
    """Authentication failed with API provider"""

    def __init__(self, provider: str, message: str = "Authentication failed"):
        super().__init__(provider, message, status_code=401)


class ServiceUnavailableError(APIProviderError):
    """Upstream service could not be reached or is temporarily unavailable"""

    def __init__(self, provider: str, message: str = "Service temporarily unavailable"):
        super().__init__(provider, message, status_code=503)


class InvalidResponseError(APIProviderError):
    """Invalid or unexpected response from API provider"""

    def __init__(self, provider: str, expected_format: str, received_data: str = None):
        message = f"Invalid response format, expected {expected_format}"
        super().__init__(provider, message, response_data={"received": received_data})


class UpstreamTimeoutError(APIProviderError):
    """Request to API provider timed out"""

    def __init__(self, provider: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        message = f"Request timed out after {timeout_seconds}s"
        super().__init__(provider, message, status_code=504)
