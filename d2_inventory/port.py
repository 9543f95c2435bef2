"""
Port inventory (not available yet)
"""

from core.logging import get_logger

from .exceptions import ServiceTypeNotSupportedError
from .schemas import GetInventoryResponse, InventoryQueryParams
from .types import ServiceType

logger = get_logger("inventory.port", domain="d2")


class PortInventoryService:
    async def get_inventory(self, params: InventoryQueryParams, tracking_id: str | None = None) -> GetInventoryResponse:
        logger.with_context(tracking_id=tracking_id).info("Port inventory requested")
        raise ServiceTypeNotSupportedError(ServiceType.PORT.value)
