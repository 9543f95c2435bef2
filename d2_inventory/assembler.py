"""
Result filter and response assembly
"""

from d1_enrichment.models import ServiceInventory

from .schemas import GetInventoryResponse, PaginationResponse


def filter_by_service_id(records: list[ServiceInventory], service_id: str | None) -> list[ServiceInventory]:
    """Case-insensitive serviceId match; no filter passes everything through"""
    if not service_id:
        return list(records)
    wanted = service_id.lower()
    return [record for record in records if record.service_id is not None and record.service_id.lower() == wanted]


def assemble_response(
    records: list[ServiceInventory],
    service_id: str | None,
    page_number: int,
    page_size: int,
) -> GetInventoryResponse:
    """
    Filter the enriched records and wrap them in the response envelope

    The catalog already paginates, so records are reported as one page and
    never sliced here.
    """
    inventory = filter_by_service_id(records, service_id)
    return GetInventoryResponse(
        inventoryList=inventory,
        pageNumber=page_number,
        pageSize=page_size,
        resultCount=len(inventory),
        pagination=[PaginationResponse(pageNumber=page_number, pageSize=page_size, totalRecords=len(inventory))],
    )
