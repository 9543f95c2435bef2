"""
Custom exceptions for the product inventory service
Provides structured error handling across all domains
"""
from typing import Any, Dict, Optional


class InventoryServiceError(Exception):
    """Base exception for all inventory service errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(InventoryServiceError):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **details} if field else details,
            status_code=400,
        )


class NotFoundError(InventoryServiceError):
    """Raised when a resource is not found"""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            error_code="NOT_FOUND",
            details={"resource": resource, "identifier": str(identifier)},
            status_code=404,
        )


class ExternalAPIError(InventoryServiceError):
    """Raised when an upstream API call cannot be used by the caller"""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        **details,
    ):
        super().__init__(
            message=f"{provider} API error: {message}",
            error_code="EXTERNAL_API_ERROR",
            details={
                "provider": provider,
                "api_status_code": status_code,
                "response_body": response_body,
                **details,
            },
            status_code=502,
        )


class NotSupportedError(InventoryServiceError):
    """Raised when a request targets functionality that is not implemented yet"""

    def __init__(self, feature: str, value: Any):
        super().__init__(
            message=f"{feature} '{value}' is not supported yet",
            error_code="NOT_IMPLEMENTED",
            details={"feature": feature, "value": str(value)},
            status_code=501,
        )


class ConfigurationError(InventoryServiceError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
            status_code=500,
        )
