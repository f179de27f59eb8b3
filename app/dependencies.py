# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import settings
from lib.retail_api_client import RetailApiClient


def get_api_client(request: Request) -> RetailApiClient:
    """
    Get a Functions API client.

    Wraps the process-wide httpx.AsyncClient created in the app lifespan.
    The wrapper itself is stateless, so a new one per request is fine.
    """
    return RetailApiClient(
        request.app.state.http_client,
        max_upload_bytes=settings.max_upload_size_bytes,
    )


# Type alias for dependency injection
ApiClientDep = Annotated[RetailApiClient, Depends(get_api_client)]
