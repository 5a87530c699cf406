import base64

from claimcheck.documents.exceptions import DocumentError, UnknownCategoryError
from claimcheck.documents.file_loader import FileLoader, guess_media_type
from claimcheck.documents.models import DocumentCategory, EncodedDocument, RawUpload
from claimcheck.logging.logger import Log


def parse_category(raw: str | None) -> DocumentCategory:
    """Resolve a declared category, defaulting to invoice when unset."""
    if raw is None or not raw.strip():
        return DocumentCategory.INVOICE
    try:
        return DocumentCategory(raw.strip().lower())
    except ValueError as exc:
        supported = [c.value for c in DocumentCategory]
        raise UnknownCategoryError(
            f"Unknown document category '{raw}'. Choose from: {supported}"
        ) from exc


class DocumentEncoder:
    """Turns raw uploads into base64 payloads with their metadata."""

    def __init__(self, file_loader: FileLoader | None = None) -> None:
        self._file_loader = file_loader if file_loader is not None else FileLoader()

    def encode(self, uploads: list[RawUpload]) -> list[EncodedDocument]:
        """Encode every upload; a failing file becomes an errored entry in place."""
        encoded = [self._encode_one(index, upload) for index, upload in enumerate(uploads)]
        failures = sum(1 for doc in encoded if doc.failed)
        Log.info(f"Encoded {len(encoded) - failures}/{len(encoded)} documents")
        return encoded

    def _encode_one(self, index: int, upload: RawUpload) -> EncodedDocument:
        media_type = upload.media_type or guess_media_type(upload.filename)
        try:
            category = parse_category(upload.category)
            raw_bytes = self._file_loader.load(upload)
        except DocumentError as exc:
            Log.warning(f"Encoding failed for document {index} '{upload.filename}': {exc}")
            return EncodedDocument(
                index=index,
                filename=upload.filename,
                media_type=media_type,
                size=len(upload.content) if upload.content is not None else 0,
                category=_category_or_default(upload.category),
                encoding_error=str(exc),
            )
        return EncodedDocument(
            index=index,
            filename=upload.filename,
            media_type=media_type,
            size=len(raw_bytes),
            category=category,
            content=base64.b64encode(raw_bytes).decode("ascii"),
        )


def _category_or_default(raw: str | None) -> DocumentCategory:
    try:
        return parse_category(raw)
    except UnknownCategoryError:
        return DocumentCategory.OTHER
