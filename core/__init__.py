"""Core utilities and configuration for the product inventory service"""
from core.config import settings
from core.exceptions import ExternalAPIError, InventoryServiceError, ValidationError
from core.logging import get_logger

__all__ = [
    "settings",
    "get_logger",
    "InventoryServiceError",
    "ValidationError",
    "ExternalAPIError",
]
