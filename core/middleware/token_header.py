"""
Token header presence check

Rejects requests that do not carry the configured token header. The token
itself is not validated here.
"""
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.config import get_settings
from core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EXEMPT_PATHS = ["/health", "/metrics", "/docs", "/redoc", "/openapi.json"]


class TokenHeaderMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, header_name: Optional[str] = None, exempt_paths: Optional[list] = None):
        super().__init__(app)
        self.header_name = header_name or get_settings().token_validation_header
        self.exempt_paths = DEFAULT_EXEMPT_PATHS if exempt_paths is None else exempt_paths

    async def dispatch(self, request: Request, call_next):
        if self._is_exempt_path(request.url.path):
            return await call_next(request)

        token = request.headers.get(self.header_name)
        if not token or not token.strip():
            logger.warning(f"Rejected {request.method} {request.url.path}: missing {self.header_name} header")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "Missing or empty authorization header"},
            )

        return await call_next(request)

    def _is_exempt_path(self, path: str) -> bool:
        return any(path.startswith(exempt_path) for exempt_path in self.exempt_paths)
