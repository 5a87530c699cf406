from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DocumentCategory(str, Enum):
    """Declared category of a supporting document."""

    INVOICE = "invoice"
    PRESCRIPTION = "prescription"
    DIAGNOSTIC = "diagnostic"
    OTHER = "other"


class MediaKind(str, Enum):
    IMAGE = "image"
    NON_IMAGE = "non_image"


IMAGE_MEDIA_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/bmp",
        "image/tiff",
    }
)


def media_kind_of(media_type: str) -> MediaKind:
    """Classify a media type string as image or non-image."""
    if media_type.strip().lower() in IMAGE_MEDIA_TYPES:
        return MediaKind.IMAGE
    return MediaKind.NON_IMAGE


@dataclass(frozen=True)
class RawUpload:
    """A file handed over by the upload layer, before encoding.

    Exactly one of ``content`` or ``path`` is expected; ``path`` is read at
    encoding time.
    """

    filename: str
    content: bytes | None = None
    path: Path | None = None
    media_type: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class EncodedDocument:
    """Transport-ready document. Immutable once handed to the sequencer."""

    index: int
    filename: str
    media_type: str
    size: int
    category: DocumentCategory
    content: str = ""
    encoding_error: str | None = None

    @property
    def failed(self) -> bool:
        return self.encoding_error is not None

    def metadata(self) -> dict[str, object]:
        """Document metadata as reported alongside validation outcomes."""
        return {
            "index": self.index,
            "filename": self.filename,
            "mediaType": self.media_type,
            "size": self.size,
            "documentType": self.category.value,
        }
