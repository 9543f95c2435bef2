"""
Main FastAPI application entry point
"""
# Initialize Sentry before anything else
import core.observability  # noqa: F401  (must be first import)

import time

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.exceptions import InventoryServiceError
from core.logging import get_logger
from core.metrics import get_metrics_response, metrics
from core.middleware import TokenHeaderMiddleware
from d0_gateway.factory import get_gateway_factory

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Token header presence check
if settings.token_validation_enabled:
    app.add_middleware(TokenHeaderMiddleware, header_name=settings.token_validation_header)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Request tracking middleware
@app.middleware("http")
async def track_requests(request: Request, call_next):
    """Track all HTTP requests for metrics"""
    start_time = time.time()

    # Skip metrics endpoint to avoid recursion
    if request.url.path == "/metrics":
        return await call_next(request)

    response = await call_next(request)

    duration = time.time() - start_time
    metrics.track_request(
        method=request.method,
        endpoint=request.url.path,
        status=response.status_code,
        duration=duration,
    )

    return response


# Exception handlers
@app.exception_handler(InventoryServiceError)
async def inventory_error_handler(request: Request, exc: InventoryServiceError):
    """Handle domain errors"""
    logger.error(f"Inventory error - error_code: {exc.error_code}, details: {exc.details}, path: {request.url.path}")
    metrics.track_error(error_type=exc.error_code, domain=request.url.path.split("/")[1] or "root")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error - path: {request.url.path}", exc_info=exc)
    metrics.track_error(error_type="INTERNAL_ERROR", domain=request.url.path.split("/")[1] or "root")
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
    )


# Custom metrics endpoint
@app.get("/metrics", include_in_schema=False)
async def prometheus_metrics():
    """Expose metrics for Prometheus scraping"""
    if not settings.prometheus_enabled:
        return JSONResponse(status_code=404, content={"error": "Metrics not enabled"})

    metrics_data, content_type = get_metrics_response()
    return Response(content=metrics_data, media_type=content_type)


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Starting {settings.app_name} version={settings.app_version} environment={settings.environment} "
        f"workers={settings.inventory_thread_allocation_count}"
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Close upstream connections"""
    await get_gateway_factory().aclose_all()
    logger.info(f"Shutting down {settings.app_name}")


# Import and register routers
from api.health import router as health_router
from d2_inventory.api import router as inventory_router

app.include_router(health_router, tags=["health"])
# Note: d2_inventory already includes prefix in router definition
app.include_router(inventory_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
