# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - retail_api_client.py: Typed async client for the Functions API
# - multipart.py: multipart/form-data body builder
# - utils.py: Shared utilities (base error class, blank checks)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.multipart import MultipartForm
from lib.retail_api_client import (
    ApiErrorKind,
    ApiResult,
    FileTooLargeError,
    RetailApiClient,
    RetailApiError,
    create_http_client,
)
from lib.utils import ApplicationError, is_blank

__all__ = [
    # Functions API
    "ApiErrorKind",
    "ApiResult",
    "FileTooLargeError",
    "RetailApiClient",
    "RetailApiError",
    "create_http_client",
    # Multipart
    "MultipartForm",
    # Utils
    "ApplicationError",
    "is_blank",
]
