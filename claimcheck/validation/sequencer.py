import threading
import time

from claimcheck.documents.models import EncodedDocument
from claimcheck.logging.logger import Log
from claimcheck.pipeline.exceptions import PipelineCancelledError
from claimcheck.validation.client import BaseValidatorClient
from claimcheck.validation.exceptions import ValidationCallError
from claimcheck.validation.mapper import map_validation_response
from claimcheck.validation.models import ValidationOutcome
from claimcheck.validation.retry import call_with_retry, linear_backoff
from claimcheck.validation.routing import EndpointRouter


class Sequencer:
    """Validates documents one at a time, in order, pausing between calls.

    Calls are never issued concurrently so the shared validators see at most
    one request from a run at any moment.
    """

    def __init__(
        self,
        router: EndpointRouter,
        client: BaseValidatorClient,
        *,
        max_attempts: int = 3,
        retry_base_delay: float = 1.0,
        inter_call_delay: float = 1.0,
    ) -> None:
        self._router = router
        self._client = client
        self._max_attempts = max_attempts
        self._backoff = linear_backoff(retry_base_delay)
        self._inter_call_delay = inter_call_delay

    def validate_all(
        self,
        documents: list[EncodedDocument],
        cancel_event: threading.Event | None = None,
    ) -> list[ValidationOutcome]:
        """Return one outcome per document, in input order.

        Raises:
            PipelineCancelledError: if ``cancel_event`` is set before the last document.
        """
        outcomes: list[ValidationOutcome] = []
        calls_made = 0
        for document in documents:
            _raise_if_cancelled(cancel_event, len(outcomes), len(documents))
            if document.failed:
                outcomes.append(
                    ValidationOutcome(
                        metadata=document.metadata(),
                        error_message=document.encoding_error,
                    )
                )
                continue
            if calls_made and self._inter_call_delay > 0:
                self._pause(cancel_event)
                _raise_if_cancelled(cancel_event, len(outcomes), len(documents))
            calls_made += 1
            outcomes.append(self._validate_one(document))
        Log.info(
            f"Validated {len(documents)} documents: "
            f"{sum(1 for o in outcomes if not o.succeeded)} failed"
        )
        return outcomes

    def _pause(self, cancel_event: threading.Event | None) -> None:
        """Wait between calls; a cancellation ends the wait early."""
        if cancel_event is None:
            time.sleep(self._inter_call_delay)
        else:
            cancel_event.wait(self._inter_call_delay)

    def _validate_one(self, document: EncodedDocument) -> ValidationOutcome:
        target = self._router.resolve(document.category, document.media_type)
        Log.info(
            f"Validating document {document.index} '{document.filename}' "
            f"({document.category.value}, {document.media_type}) via {target.route.value}"
        )
        try:
            data = call_with_retry(
                lambda: self._client.validate(target, document.content),
                max_attempts=self._max_attempts,
                backoff=self._backoff,
                operation_name=f"Validation of document {document.index}",
            )
        except ValidationCallError as exc:
            Log.error(f"Document {document.index} '{document.filename}' failed: {exc}")
            return ValidationOutcome(metadata=document.metadata(), error_message=str(exc))
        return ValidationOutcome(
            metadata=document.metadata(),
            payload=map_validation_response(data),
        )


def _raise_if_cancelled(
    cancel_event: threading.Event | None, done: int, total: int
) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise PipelineCancelledError(f"Run cancelled after {done}/{total} documents")
