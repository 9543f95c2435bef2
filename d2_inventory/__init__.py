"""
D2 Inventory - Inventory queries, service-type dispatch and the HTTP endpoint
"""

from .assembler import assemble_response, filter_by_service_id
from .exceptions import CatalogUnavailableError, InventoryNotFoundError, ServiceTypeNotSupportedError
from .internet import InternetInventoryService
from .port import PortInventoryService
from .schemas import GetInventoryResponse, InventoryQueryParams, PaginationResponse
from .service import InventoryQueryService
from .types import ServiceType

__all__ = [
    "assemble_response",
    "filter_by_service_id",
    "CatalogUnavailableError",
    "InventoryNotFoundError",
    "ServiceTypeNotSupportedError",
    "InternetInventoryService",
    "PortInventoryService",
    "GetInventoryResponse",
    "InventoryQueryParams",
    "PaginationResponse",
    "InventoryQueryService",
    "ServiceType",
]
