"""
Inventory API Endpoints

GET /Naas/v1/ProductInventory/inventory returns the enriched inventory for
one or more customers.
"""

import uuid

from fastapi import APIRouter, Depends, Header, Query

from d0_gateway.factory import get_account_client, get_catalog_client, get_location_client

from .internet import InternetInventoryService
from .schemas import GetInventoryResponse, InventoryQueryParams
from .service import InventoryQueryService

router = APIRouter(prefix="/Naas/v1/ProductInventory", tags=["inventory"])


def get_inventory_query_service() -> InventoryQueryService:
    """Dependency to build the query service on the shared gateway clients"""
    internet_service = InternetInventoryService(
        catalog_client=get_catalog_client(),
        account_client=get_account_client(),
        location_client=get_location_client(),
    )
    return InventoryQueryService(internet_service)


def get_tracking_id(
    x_correlation_id: str | None = Header(default=None),
    trackingid: str | None = Header(default=None),
) -> str:
    """Inbound tracking id, or a fresh one when the caller sent none"""
    return x_correlation_id or trackingid or str(uuid.uuid4())


@router.get(
    "/inventory",
    response_model=GetInventoryResponse,
    response_model_exclude_none=True,
    summary="Get Customer Inventory",
    description="Inventory for one or more customers, enriched with billing account and location details",
)
async def get_customer_inventory(
    customer_numbers: list[str] | None = Query(
        default=None, alias="customerNumbers", description="Customer numbers, repeated or comma-separated"
    ),
    service_type: str | None = Query(default=None, alias="serviceType", description="Internet or Port"),
    service_id: str | None = Query(default=None, alias="serviceId", description="Only return this service"),
    page_number: int | None = Query(default=None, alias="pageNumber"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    tracking_id: str = Depends(get_tracking_id),
    query_service: InventoryQueryService = Depends(get_inventory_query_service),
) -> GetInventoryResponse:
    params = InventoryQueryParams.from_request(
        customer_numbers=customer_numbers,
        service_type=service_type,
        service_id=service_id,
        page_number=page_number,
        page_size=page_size,
    )
    return await query_service.get_customer_inventory(params, tracking_id=tracking_id)
