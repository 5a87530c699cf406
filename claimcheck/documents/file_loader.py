import mimetypes

from claimcheck.documents.exceptions import FileReadError
from claimcheck.documents.models import RawUpload

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(filename: str) -> str:
    """Guess a media type from the file extension, falling back to octet-stream."""
    guessed, _encoding = mimetypes.guess_type(filename)
    return guessed or DEFAULT_MEDIA_TYPE


class FileLoader:
    """Resolves the raw bytes of an upload, reading from disk when needed."""

    def load(self, upload: RawUpload) -> bytes:
        """Return the upload bytes.

        Raises:
            FileReadError: if the upload has no content and its path cannot be read.
        """
        if upload.content is not None:
            return upload.content
        if upload.path is None:
            raise FileReadError(f"Upload '{upload.filename}' has neither content nor path")
        try:
            return upload.path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read '{upload.path}': {exc}") from exc
