# =============================================================================
# tests/test_multipart.py - Multipart Form Builder Tests
# =============================================================================

import httpx

from core.models import UploadedFile
from lib.multipart import MultipartForm
from tests.fakes import parse_multipart


class TestMultipartForm:
    """Tests for MultipartForm part assembly."""

    def test_text_fields_have_no_filename(self):
        form = MultipartForm().add_field("ProductName", "Kettle").add_field("StockAvailable", 4)

        assert form.to_files() == [
            ("ProductName", (None, b"Kettle", None)),
            ("StockAvailable", (None, b"4", None)),
        ]

    def test_optional_field_skips_blank(self):
        form = (
            MultipartForm()
            .add_optional_field("ImageUrl", None)
            .add_optional_field("ImageUrl", "   ")
            .add_optional_field("OrderId", "o-1")
        )

        assert form.field_names == ["OrderId"]

    def test_file_skipped_when_missing_or_empty(self):
        form = (
            MultipartForm()
            .add_file("ImageFile", None)
            .add_file("ImageFile", UploadedFile(filename="empty.png", content=b""))
        )

        assert len(form) == 0

    def test_file_part_defaults_content_type(self):
        form = MultipartForm().add_file("ProofOfPayment", UploadedFile(filename="slip.bin", content=b"\x00\x01"))

        assert form.to_files() == [
            ("ProofOfPayment", ("slip.bin", b"\x00\x01", "application/octet-stream")),
        ]

    def test_text_only_form_still_encodes_as_multipart(self):
        """httpx must produce a multipart body even with no file attached."""
        form = MultipartForm().add_field("ProductName", "Kettle").add_field("Description", "")

        request = httpx.Request("POST", "http://functions.test/api/products", files=form.to_files())
        request.read()

        assert request.headers["content-type"].startswith("multipart/form-data")
        parts = parse_multipart(request)
        assert parts["ProductName"].text == "Kettle"
        assert parts["ProductName"].filename is None
        assert parts["Description"].text == ""

    def test_file_part_round_trips_through_parser(self):
        """Binary content with embedded CRLFs arrives byte-for-byte."""
        payload = b"%PDF\r\n\r\n--not-a-boundary\r\n\x00\xff"
        slip = UploadedFile(filename="slip.pdf", content=payload, content_type="application/pdf")
        form = MultipartForm().add_field("OrderId", "o-1").add_file("ProofOfPayment", slip)

        request = httpx.Request("POST", "http://functions.test/api/uploads/proof-of-payment", files=form.to_files())
        request.read()

        parts = parse_multipart(request)
        assert parts["ProofOfPayment"].content == payload
        assert parts["ProofOfPayment"].filename == "slip.pdf"
        assert parts["ProofOfPayment"].content_type == "application/pdf"
        assert parts["OrderId"].text == "o-1"
