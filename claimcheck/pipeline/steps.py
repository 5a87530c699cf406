import threading

from claimcheck.claims.submission import SubmissionGuard
from claimcheck.documents.encoder import DocumentEncoder
from claimcheck.logging.logger import Log
from claimcheck.pipeline.pipeline import PipelineContext, PipelineStep
from claimcheck.risk.aggregator import aggregate
from claimcheck.risk.config_client import RiskConfigClient
from claimcheck.validation.sequencer import Sequencer


class EncodeDocumentsStep(PipelineStep):
    def __init__(self, encoder: DocumentEncoder) -> None:
        self._encoder = encoder

    def run(self, context: PipelineContext) -> PipelineContext:
        context.documents = self._encoder.encode(context.uploads)
        return context


class LoadRiskBandsStep(PipelineStep):
    """Fetches the bands once; a run never refetches them."""

    def __init__(self, config_client: RiskConfigClient) -> None:
        self._config_client = config_client

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.risk_bands is None:
            context.risk_bands = self._config_client.fetch_bands()
        return context


class ValidateDocumentsStep(PipelineStep):
    def __init__(self, sequencer: Sequencer, cancel_event: threading.Event) -> None:
        self._sequencer = sequencer
        self._cancel_event = cancel_event

    def run(self, context: PipelineContext) -> PipelineContext:
        context.outcomes = self._sequencer.validate_all(context.documents, self._cancel_event)
        return context


class AssessClaimStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.risk_bands is None:
            raise ValueError("PipelineContext.risk_bands must be set before assessment")
        context.assessment = aggregate(context.outcomes, context.risk_bands)
        labels = [c.label if c.label is not None else "-" for c in context.assessment.classifications]
        Log.info(f"Claim assessed as {context.assessment.status.value}, labels {labels}")
        return context


class SubmitClaimStep(PipelineStep):
    def __init__(self, guard: SubmissionGuard) -> None:
        self._guard = guard

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.assessment is None:
            raise ValueError("PipelineContext.assessment must be set before submission")
        record = self._guard.observe(context.assessment)
        if record is not None:
            context.claim_record = record
        return context
