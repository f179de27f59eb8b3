# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small helpers shared by the API client and the routers.
# =============================================================================

from typing import Any


# =============================================================================
# Identifier Utilities
# =============================================================================

def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Root of the errors raised outside the web layer.

    Attributes:
        code: Machine-readable category, e.g. "API_NOT_FOUND"
        message: What went wrong, safe to show to a user
        suggestion: What to change to make it work, if known
        details: Extra values for the logs (ids, sizes, response snippets)

    Example:
        raise RetailApiError("POST /api/orders returned 409", kind=ApiErrorKind.VALIDATION)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        return self.message
