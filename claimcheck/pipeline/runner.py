import threading

import httpx

from claimcheck.adjudication.client import AdjudicationClient
from claimcheck.adjudication.models import AdjudicationResult
from claimcheck.claims.models import ClaimContext
from claimcheck.claims.submission import SubmissionGuard
from claimcheck.config.settings import Settings
from claimcheck.database.repositories.claim_record_repository import ClaimRecordRepository
from claimcheck.documents.encoder import DocumentEncoder
from claimcheck.documents.models import RawUpload
from claimcheck.logging.logger import Log
from claimcheck.pipeline.exceptions import PipelineCancelledError, PipelineError
from claimcheck.pipeline.pipeline import PipelineContext, PipelineStep
from claimcheck.pipeline.steps import (
    AssessClaimStep,
    EncodeDocumentsStep,
    LoadRiskBandsStep,
    SubmitClaimStep,
    ValidateDocumentsStep,
)
from claimcheck.risk.config_client import RiskConfigClient
from claimcheck.transport.responses import build_http_client
from claimcheck.validation.client import HttpValidatorClient
from claimcheck.validation.routing import EndpointRouter
from claimcheck.validation.sequencer import Sequencer


class ClaimRun:
    """One pipeline run for one claim.

    Pipeline: encode -> load bands -> validate -> assess -> submit.
    The adjudication hand-off is not part of ``run``; callers trigger it
    explicitly once the run has completed.
    """

    def __init__(
        self,
        context: PipelineContext,
        steps: list[PipelineStep],
        guard: SubmissionGuard,
        adjudication_client: AdjudicationClient,
        cancel_event: threading.Event,
        owned_http_client: httpx.Client | None = None,
    ) -> None:
        self.context = context
        self.guard = guard
        self._steps = steps
        self._adjudication_client = adjudication_client
        self._cancel_event = cancel_event
        self._owned_http_client = owned_http_client
        self.completed = False

    def run(self) -> PipelineContext:
        """Execute every step in order.

        Raises:
            PipelineCancelledError: if ``cancel`` was called before validation finished.
        """
        if self.completed:
            Log.debug("Claim run already completed, returning previous result")
            return self.context
        Log.info(f"Starting claim run with {len(self.context.uploads)} documents")
        for step in self._steps:
            try:
                self.context = step.run(self.context)
            except PipelineCancelledError as exc:
                Log.warning(f"Claim run cancelled: {exc}")
                raise
        self.completed = True
        return self.context

    def cancel(self) -> None:
        self._cancel_event.set()

    def close(self) -> None:
        """Close the HTTP client this run created; injected clients stay open."""
        if self._owned_http_client is not None:
            self._owned_http_client.close()
            self._owned_http_client = None

    def adjudicate(self) -> AdjudicationResult:
        """Hand the completed run to the adjudication workflow.

        Raises:
            PipelineError: if the run has not completed.
            AdjudicationError: if the workflow call fails.
        """
        if not self.completed:
            raise PipelineError("Claim run must complete before adjudication")
        return self._adjudication_client.hand_off(self.context.claim, self.context.outcomes)


def build_claim_run(
    settings: Settings,
    claim: ClaimContext,
    uploads: list[RawUpload],
    http_client: httpx.Client | None = None,
    repository: ClaimRecordRepository | None = None,
) -> ClaimRun:
    """Wire a ClaimRun with HTTP adapters and the claim record repository."""
    owned_client: httpx.Client | None = None
    if http_client is None:
        client = owned_client = build_http_client(settings.http_timeout_seconds)
    else:
        client = http_client
    cancel_event = threading.Event()
    guard = SubmissionGuard(
        repository if repository is not None else ClaimRecordRepository(),
        claim,
        settings.claim_currency,
    )
    sequencer = Sequencer(
        EndpointRouter(settings),
        HttpValidatorClient(client),
        max_attempts=settings.max_call_attempts,
        retry_base_delay=settings.retry_base_delay_seconds,
        inter_call_delay=settings.inter_call_delay_seconds,
    )
    config_client = RiskConfigClient(
        client,
        settings.risk_config_url,
        max_attempts=settings.max_call_attempts,
        retry_base_delay=settings.retry_base_delay_seconds,
    )
    adjudication_client = AdjudicationClient(
        client,
        settings.adjudication_url,
        source=settings.adjudication_source,
        max_attempts=settings.max_call_attempts,
        retry_base_delay=settings.retry_base_delay_seconds,
    )
    steps: list[PipelineStep] = [
        EncodeDocumentsStep(DocumentEncoder()),
        LoadRiskBandsStep(config_client),
        ValidateDocumentsStep(sequencer, cancel_event),
        AssessClaimStep(),
        SubmitClaimStep(guard),
    ]
    return ClaimRun(
        PipelineContext(claim=claim, uploads=list(uploads)),
        steps,
        guard,
        adjudication_client,
        cancel_event,
        owned_http_client=owned_client,
    )
