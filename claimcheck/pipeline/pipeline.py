from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from claimcheck.claims.models import ClaimContext, ClaimRecord
from claimcheck.documents.models import EncodedDocument, RawUpload
from claimcheck.risk.aggregator import ClaimAssessment
from claimcheck.risk.models import RiskBandConfiguration
from claimcheck.validation.models import ValidationOutcome


@dataclass(slots=True)
class PipelineContext:
    claim: ClaimContext
    uploads: list[RawUpload] = field(default_factory=list)
    documents: list[EncodedDocument] = field(default_factory=list)
    risk_bands: RiskBandConfiguration | None = None
    outcomes: list[ValidationOutcome] = field(default_factory=list)
    assessment: ClaimAssessment | None = None
    claim_record: ClaimRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
