# =============================================================================
# app/exceptions.py - Custom Exceptions & Handlers
# =============================================================================
# Page-level errors raised by routers. Failures talking to the Functions API
# are RetailApiError (lib/retail_api_client.py) and are caught inside the
# routers, not here.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse

from app.templating import render

logger = logging.getLogger(__name__)


class RetailersException(Exception):
    """
    Base exception for the web app.

    Carries the HTTP status the error page should be served with.
    """

    def __init__(
        self,
        message: str,
        code: str = "RETAILERS_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


class EntityNotFoundError(RetailersException):
    """Raised when an id is blank or the Functions API has no such entity."""

    def __init__(self, entity: str, entity_id: str | None):
        super().__init__(
            message=f"{entity} not found: {entity_id or '(blank)'}",
            code=f"{entity.upper()}_NOT_FOUND",
            status_code=404,
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity


# =============================================================================
# Exception Handlers
# =============================================================================

async def retailers_exception_handler(
    request: Request,
    exc: RetailersException,
) -> HTMLResponse:
    """Render the error page with the exception's status code."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return render(
        request,
        "error.html",
        {"error": exc, "title": "Not Found" if exc.status_code == 404 else "Error"},
        status_code=exc.status_code,
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything the routers didn't catch."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )
