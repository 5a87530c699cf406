from abc import ABC, abstractmethod
from typing import Any

import httpx

from claimcheck.transport.responses import extract_error_message, read_json
from claimcheck.validation.exceptions import (
    MalformedResponseError,
    TransientCallError,
    ValidationRejectedError,
)
from claimcheck.validation.routing import RouteTarget


class BaseValidatorClient(ABC):
    """Contract for document validator clients."""

    @abstractmethod
    def validate(self, target: RouteTarget, encoded_content: str) -> dict[str, Any]:
        """Send one encoded document to the validator behind ``target``.

        Returns:
            The validator's JSON object, as received.

        Raises:
            TransientCallError: on transport failure (retryable).
            ValidationRejectedError: when the validator answers with an error status.
            MalformedResponseError: when the response cannot be decoded or is not a JSON object.
        """


class HttpValidatorClient(BaseValidatorClient):
    """Validator client performing a single JSON POST per call."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def validate(self, target: RouteTarget, encoded_content: str) -> dict[str, Any]:
        try:
            response = self._client.post(target.url, json=target.build_body(encoded_content))
        except httpx.TransportError as exc:
            raise TransientCallError(
                f"Validator {target.route.value} unreachable: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            raise MalformedResponseError(
                f"Validator {target.route.value} sent an unreadable response: {exc}"
            ) from exc

        if response.is_error:
            raise ValidationRejectedError(
                extract_error_message(response), status_code=response.status_code
            )

        data = read_json(response)
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Validator {target.route.value} returned a non-object response"
            )
        return data
