import base64
from pathlib import Path

import pytest

from claimcheck.documents.encoder import DocumentEncoder, parse_category
from claimcheck.documents.exceptions import UnknownCategoryError
from claimcheck.documents.models import DocumentCategory, RawUpload


class TestParseCategory:
    def test_defaults_to_invoice_when_unset(self) -> None:
        assert parse_category(None) is DocumentCategory.INVOICE

    def test_defaults_to_invoice_when_blank(self) -> None:
        assert parse_category("  ") is DocumentCategory.INVOICE

    def test_is_case_insensitive(self) -> None:
        assert parse_category("Prescription") is DocumentCategory.PRESCRIPTION

    def test_rejects_unknown(self) -> None:
        with pytest.raises(UnknownCategoryError, match="receipt"):
            parse_category("receipt")


class TestEncode:
    def test_encodes_content_and_metadata(self, sample_pdf_bytes: bytes) -> None:
        upload = RawUpload(
            filename="invoice.pdf",
            content=sample_pdf_bytes,
            media_type="application/pdf",
            category="invoice",
        )

        [document] = DocumentEncoder().encode([upload])

        assert document.index == 0
        assert document.filename == "invoice.pdf"
        assert document.media_type == "application/pdf"
        assert document.size == len(sample_pdf_bytes)
        assert document.category is DocumentCategory.INVOICE
        assert base64.b64decode(document.content) == sample_pdf_bytes
        assert not document.failed

    def test_category_defaults_to_invoice(self) -> None:
        [document] = DocumentEncoder().encode([RawUpload(filename="a.pdf", content=b"x")])

        assert document.category is DocumentCategory.INVOICE

    def test_media_type_guessed_from_filename(self) -> None:
        [document] = DocumentEncoder().encode([RawUpload(filename="scan.png", content=b"x")])

        assert document.media_type == "image/png"

    def test_failure_does_not_abort_remaining_files(self, tmp_path: Path) -> None:
        uploads = [
            RawUpload(filename="a.pdf", content=b"first"),
            RawUpload(filename="gone.pdf", path=tmp_path / "gone.pdf"),
            RawUpload(filename="c.pdf", content=b"third", category="diagnostic"),
        ]

        documents = DocumentEncoder().encode(uploads)

        assert [d.index for d in documents] == [0, 1, 2]
        assert not documents[0].failed
        assert documents[1].failed
        assert "gone.pdf" in (documents[1].encoding_error or "")
        assert documents[1].content == ""
        assert not documents[2].failed
        assert documents[2].category is DocumentCategory.DIAGNOSTIC

    def test_unknown_category_is_a_per_item_failure(self) -> None:
        documents = DocumentEncoder().encode(
            [RawUpload(filename="a.pdf", content=b"x", category="receipt")]
        )

        assert documents[0].failed
        assert documents[0].category is DocumentCategory.OTHER
        assert "receipt" in (documents[0].encoding_error or "")
