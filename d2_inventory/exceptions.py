"""
Inventory domain exceptions
"""
from core.exceptions import ExternalAPIError, NotFoundError, NotSupportedError


class CatalogUnavailableError(ExternalAPIError):
    """The catalog could not produce a usable payload"""

    def __init__(self, message: str, upstream_status: int | None = None, upstream_error: str | None = None):
        super().__init__(
            provider="catalog",
            message=message,
            status_code=upstream_status,
            response_body=upstream_error,
        )
        self.error_code = "CATALOG_UNAVAILABLE"


class InventoryNotFoundError(NotFoundError):
    """Catalog returned no records for the requested customers"""

    def __init__(self, customer_numbers: list[str]):
        super().__init__("Internet inventory for customers", ",".join(customer_numbers))


class ServiceTypeNotSupportedError(NotSupportedError):
    def __init__(self, service_type: str):
        super().__init__("Service type", service_type)
