"""Maps (document category, media kind) to a validator endpoint.

The image route carries the payload under ``imagen_base64`` while the invoice
and generic routes use ``pdfbase64``. The validators expect exactly these
field names.
"""

from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from claimcheck.config.settings import Settings
from claimcheck.documents.models import DocumentCategory, MediaKind, media_kind_of

IMAGE_PAYLOAD_FIELD = "imagen_base64"
DOCUMENT_PAYLOAD_FIELD = "pdfbase64"


class Route(str, Enum):
    IMAGE = "image"
    INVOICE = "invoice"
    DOCUMENT = "document"


@dataclass(frozen=True)
class RouteTarget:
    route: Route
    url: str
    payload_field: str

    def build_body(self, encoded_content: str) -> dict[str, str]:
        return {self.payload_field: encoded_content}


def select_route(category: DocumentCategory, media_kind: MediaKind) -> Route:
    """Resolve the route for every category/media-kind combination."""
    if category is DocumentCategory.INVOICE:
        if media_kind is MediaKind.IMAGE:
            return Route.IMAGE
        if media_kind is MediaKind.NON_IMAGE:
            return Route.INVOICE
        assert_never(media_kind)
    if (
        category is DocumentCategory.PRESCRIPTION
        or category is DocumentCategory.DIAGNOSTIC
        or category is DocumentCategory.OTHER
    ):
        return Route.DOCUMENT
    assert_never(category)


class EndpointRouter:
    """Binds routes to the configured validator addresses."""

    def __init__(self, settings: Settings) -> None:
        self._targets = {
            Route.IMAGE: RouteTarget(Route.IMAGE, settings.validator_image_url, IMAGE_PAYLOAD_FIELD),
            Route.INVOICE: RouteTarget(
                Route.INVOICE, settings.validator_invoice_url, DOCUMENT_PAYLOAD_FIELD
            ),
            Route.DOCUMENT: RouteTarget(
                Route.DOCUMENT, settings.validator_document_url, DOCUMENT_PAYLOAD_FIELD
            ),
        }

    def resolve(self, category: DocumentCategory, media_type: str) -> RouteTarget:
        return self._targets[select_route(category, media_kind_of(media_type))]
