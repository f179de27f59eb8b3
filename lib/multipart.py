# =============================================================================
# lib/multipart.py - Multipart Form Builder
# =============================================================================
# Assembles multipart/form-data bodies for the Functions API.
#
# httpx only switches to multipart encoding when `files=` is non-empty, so
# text fields are emitted as filename-less parts alongside any file parts.
# This keeps product writes multipart even when no image is attached.
#
# Usage:
#   form = MultipartForm()
#   form.add_field("ProductName", "Kettle")
#   form.add_optional_field("ImageUrl", product.image_url)
#   form.add_file("ImageFile", image)
#   await http.post("products", files=form.to_files())
# =============================================================================

from __future__ import annotations

from core.models.upload import UploadedFile

# A part is (field name, (filename or None, payload, content type or None))
Part = tuple[str, tuple[str | None, bytes, str | None]]


class MultipartForm:
    """Ordered collection of text and file parts."""

    def __init__(self) -> None:
        self._parts: list[Part] = []

    def add_field(self, name: str, value: object) -> MultipartForm:
        text = "" if value is None else str(value)
        self._parts.append((name, (None, text.encode("utf-8"), None)))
        return self

    def add_optional_field(self, name: str, value: str | None) -> MultipartForm:
        """Add a text part only when the value is non-blank."""
        if value is not None and value.strip():
            self.add_field(name, value)
        return self

    def add_file(self, name: str, file: UploadedFile | None) -> MultipartForm:
        """
        Add a binary part. Missing or zero-length files are skipped.

        The content type defaults to application/octet-stream.
        """
        if file is None or file.is_empty:
            return self
        self._parts.append((name, (file.filename, file.content, file.media_type)))
        return self

    @property
    def field_names(self) -> list[str]:
        return [name for name, _ in self._parts]

    def __len__(self) -> int:
        return len(self._parts)

    def to_files(self) -> list[Part]:
        """Parts in the shape httpx expects for `files=`."""
        return list(self._parts)
