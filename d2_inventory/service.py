"""
Inventory query service

Entry point for inventory queries; routes each request to the service for
its service type.
"""

from core.logging import get_logger

from .internet import InternetInventoryService
from .port import PortInventoryService
from .schemas import GetInventoryResponse, InventoryQueryParams
from .types import ServiceType

logger = get_logger("inventory.query", domain="d2")


class InventoryQueryService:
    def __init__(self, internet_service: InternetInventoryService, port_service: PortInventoryService | None = None):
        self.internet_service = internet_service
        self.port_service = port_service or PortInventoryService()

    async def get_customer_inventory(
        self, params: InventoryQueryParams, tracking_id: str | None = None
    ) -> GetInventoryResponse:
        logger.with_context(tracking_id=tracking_id).debug(params.query_summary())

        if params.service_type is ServiceType.PORT:
            return await self.port_service.get_inventory(params, tracking_id=tracking_id)
        return await self.internet_service.get_inventory(params, tracking_id=tracking_id)
