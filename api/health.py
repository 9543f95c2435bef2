"""
Health check endpoints
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.config import settings
from core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check() -> JSONResponse:
    """
    Liveness check for external monitoring systems.

    The service keeps no state and owns no storage, so being able to answer
    is the whole check. Upstream availability is reported per request.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "app": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
        },
    )


@router.get("/health/detailed")
async def detailed_health_check() -> JSONResponse:
    """
    Health check plus the effective upstream and enrichment configuration.

    Secrets never appear here.
    """
    start_time = time.time()
    basic_response = await health_check()

    import json

    health_data = json.loads(basic_response.body)
    health_data["system"] = {
        "upstreams": settings.api_base_urls,
        "enrichment": {
            "worker_count": settings.inventory_thread_allocation_count,
            "valid_attributes": settings.valid_attributes,
            "service_type_label": settings.product_specification_name,
        },
        "limits": {
            "request_timeout": settings.request_timeout,
            "account_lookup_timeout": settings.account_lookup_timeout,
            "location_lookup_timeout": settings.location_lookup_timeout,
            "catalog_max_page_size": settings.catalog_max_page_size,
        },
        "token_validation": {
            "enabled": settings.token_validation_enabled,
            "header": settings.token_validation_header,
        },
    }
    health_data["response_time_ms"] = round((time.time() - start_time) * 1000, 2)

    return JSONResponse(status_code=basic_response.status_code, content=health_data)
