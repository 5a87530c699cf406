class ValidationCallError(Exception):
    """Base exception for calls to the external document validators."""


class TransientCallError(ValidationCallError):
    """Raised when the call failed at the transport level and may succeed on retry."""


class ValidationRejectedError(ValidationCallError):
    """Raised when the validator responded with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ValidationCallError):
    """Raised when a response cannot be decoded or does not carry a JSON object."""
