from datetime import datetime, timezone
from typing import Any

import httpx

from claimcheck.adjudication.exceptions import AdjudicationError
from claimcheck.adjudication.mapper import map_adjudication_response
from claimcheck.adjudication.models import AdjudicationResult
from claimcheck.claims.models import ClaimContext
from claimcheck.logging.logger import Log
from claimcheck.transport.responses import extract_error_message, read_json
from claimcheck.validation.exceptions import TransientCallError
from claimcheck.validation.models import ValidationOutcome
from claimcheck.validation.retry import call_with_retry, linear_backoff


def build_handoff_body(
    context: ClaimContext,
    outcomes: list[ValidationOutcome],
    source: str,
) -> dict[str, Any]:
    return {
        "payload": context.to_payload(),
        "validationResults": [outcome.to_dict() for outcome in outcomes],
        "meta": {
            "source": source,
            "sentAt": datetime.now(timezone.utc).isoformat(),
        },
    }


class AdjudicationClient:
    """Sends a validated claim to the downstream adjudication workflow."""

    def __init__(
        self,
        client: httpx.Client,
        url: str,
        *,
        source: str = "claimcheck",
        max_attempts: int = 3,
        retry_base_delay: float = 1.0,
    ) -> None:
        self._client = client
        self._url = url
        self._source = source
        self._max_attempts = max_attempts
        self._backoff = linear_backoff(retry_base_delay)

    def hand_off(
        self, context: ClaimContext, outcomes: list[ValidationOutcome]
    ) -> AdjudicationResult:
        """Post the claim with its validation results and map the answer.

        Raises:
            AdjudicationError: with a readable message when the call fails.
        """
        body = build_handoff_body(context, outcomes, self._source)
        Log.info(f"Handing off claim with {len(outcomes)} validation results")
        try:
            data = call_with_retry(
                lambda: self._post(body),
                max_attempts=self._max_attempts,
                backoff=self._backoff,
                operation_name="Adjudication hand-off",
            )
        except TransientCallError as exc:
            raise AdjudicationError(f"Adjudication workflow unreachable: {exc}") from exc
        result = map_adjudication_response(data)
        Log.info(
            f"Adjudication answered: success={result.is_success}, "
            f"approved={result.total_reimbursement}, items={len(result.approved_items)}"
        )
        return result

    def _post(self, body: dict[str, Any]) -> Any:
        try:
            response = self._client.post(self._url, json=body)
        except httpx.TransportError as exc:
            raise TransientCallError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise AdjudicationError(
                f"Adjudication workflow sent an unreadable response: {exc}"
            ) from exc
        if response.is_error:
            message = extract_error_message(response)
            Log.error(f"Adjudication hand-off rejected: {message}")
            raise AdjudicationError(message)
        return read_json(response)
