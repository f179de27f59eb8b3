# =============================================================================
# core/models/upload.py - Attached File Schema
# =============================================================================
# UploadedFile is the framework-neutral form of a file a user attached to a
# form (product image, proof of payment). Routers convert FastAPI's
# UploadFile into this before handing it to the API client.
# =============================================================================

from pydantic import BaseModel, Field

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class UploadedFile(BaseModel):
    """A file held in memory for forwarding to the Functions API."""

    filename: str = Field(..., min_length=1)
    content: bytes = b""
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def media_type(self) -> str:
        return self.content_type or DEFAULT_CONTENT_TYPE
