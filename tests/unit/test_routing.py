import pytest

from claimcheck.config.settings import Settings
from claimcheck.documents.models import DocumentCategory, MediaKind
from claimcheck.validation.routing import (
    DOCUMENT_PAYLOAD_FIELD,
    IMAGE_PAYLOAD_FIELD,
    EndpointRouter,
    Route,
    select_route,
)


class TestSelectRoute:
    def test_invoice_image_goes_to_image_route(self) -> None:
        assert select_route(DocumentCategory.INVOICE, MediaKind.IMAGE) is Route.IMAGE

    def test_invoice_pdf_goes_to_invoice_route(self) -> None:
        assert select_route(DocumentCategory.INVOICE, MediaKind.NON_IMAGE) is Route.INVOICE

    @pytest.mark.parametrize(
        "category",
        [DocumentCategory.PRESCRIPTION, DocumentCategory.DIAGNOSTIC, DocumentCategory.OTHER],
    )
    @pytest.mark.parametrize("kind", list(MediaKind))
    def test_other_categories_go_to_document_route(
        self, category: DocumentCategory, kind: MediaKind
    ) -> None:
        assert select_route(category, kind) is Route.DOCUMENT

    def test_every_combination_resolves(self) -> None:
        for category in DocumentCategory:
            for kind in MediaKind:
                assert isinstance(select_route(category, kind), Route)


class TestEndpointRouter:
    def test_image_route_uses_image_field(self, settings: Settings) -> None:
        target = EndpointRouter(settings).resolve(DocumentCategory.INVOICE, "IMAGE/JPEG")

        assert target.url == "http://validators.test/image"
        assert target.build_body("abc") == {IMAGE_PAYLOAD_FIELD: "abc"}

    def test_invoice_pdf_uses_document_field(self, settings: Settings) -> None:
        target = EndpointRouter(settings).resolve(DocumentCategory.INVOICE, "application/pdf")

        assert target.url == "http://validators.test/invoice"
        assert target.build_body("abc") == {DOCUMENT_PAYLOAD_FIELD: "abc"}

    def test_prescription_image_uses_document_route(self, settings: Settings) -> None:
        target = EndpointRouter(settings).resolve(DocumentCategory.PRESCRIPTION, "image/png")

        assert target.route is Route.DOCUMENT
        assert target.url == "http://validators.test/document"
        assert target.payload_field == DOCUMENT_PAYLOAD_FIELD

    def test_payload_fields_differ(self) -> None:
        assert IMAGE_PAYLOAD_FIELD == "imagen_base64"
        assert DOCUMENT_PAYLOAD_FIELD == "pdfbase64"
