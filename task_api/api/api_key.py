"""API Key Middleware — shared-secret header gate in front of every route.

Invariants:
    - Console path (exact or "<path>/..." prefix) passes through unchecked
    - Missing or empty header → 401 "Missing API key"
    - Header not exactly equal to the configured key → 401 "Invalid API key"
    - Accepted requests are forwarded unchanged
    - The submitted key is never logged

Design Decisions:
    - Middleware over a router dependency: also gates unknown paths and the health checks
    - Flat {"error", "message"} body: clients match on the error string
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def is_exempt_path(path: str, console_path: str) -> bool:
    return path == console_path or path.startswith(console_path.rstrip("/") + "/")


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests whose API key header is missing or wrong."""

    def __init__(
        self,
        app: ASGIApp,
        api_key: str,
        header_name: str = "X-API-KEY",
        console_path: str = "/h2-console",
    ):
        super().__init__(app)
        self.api_key = api_key
        self.header_name = header_name
        self.console_path = console_path

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if is_exempt_path(path, self.console_path):
            return await call_next(request)

        supplied = request.headers.get(self.header_name)
        if not supplied:
            logger.warning(
                "Rejected request without API key",
                extra={"path": path, "status_code": 401},
            )
            return _unauthorized(
                "Missing API key", f"{self.header_name} header is required",
            )
        if supplied != self.api_key:
            logger.warning(
                "Rejected request with invalid API key",
                extra={"path": path, "status_code": 401},
            )
            return _unauthorized(
                "Invalid API key", "The provided API key is invalid",
            )
        return await call_next(request)


def _unauthorized(error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": error, "message": message},
    )
