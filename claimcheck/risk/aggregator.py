"""Reduces per-document validation outcomes to one claim status.

Precedence, evaluated over every document before deciding:

1. any failed validation or any most-severe label -> Rejected
2. any missing risk score, unknown label or middle label -> UnderReview
3. at least one least-severe label -> Approved
4. no documents -> UnderReview
"""

from dataclasses import dataclass, field
from enum import Enum

from claimcheck.risk.classifier import classify_score
from claimcheck.risk.models import RiskBandConfiguration, Severity
from claimcheck.validation.models import ValidationOutcome


class ClaimStatus(str, Enum):
    APPROVED = "Approved"
    UNDER_REVIEW = "UnderReview"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class DocumentClassification:
    """Per-document verdict; ``label`` is None for failed or score-less documents."""

    index: int
    filename: str
    score: float | None = None
    label: str | None = None
    failed: bool = False


@dataclass(frozen=True)
class ClaimAssessment:
    status: ClaimStatus
    classifications: list[DocumentClassification] = field(default_factory=list)

    @property
    def document_count(self) -> int:
        return len(self.classifications)


def classify_outcome(
    outcome: ValidationOutcome, config: RiskBandConfiguration
) -> DocumentClassification:
    index, filename = outcome.index, outcome.filename
    if outcome.payload is None:
        return DocumentClassification(index=index, filename=filename, failed=True)
    risk = outcome.payload.risk
    if risk is None:
        return DocumentClassification(index=index, filename=filename)
    return DocumentClassification(
        index=index,
        filename=filename,
        score=risk.score,
        label=classify_score(risk.score, config),
    )


def aggregate(
    outcomes: list[ValidationOutcome], config: RiskBandConfiguration
) -> ClaimAssessment:
    """Classify every outcome and derive the claim status."""
    classifications = [classify_outcome(outcome, config) for outcome in outcomes]
    return ClaimAssessment(
        status=derive_status(classifications, config),
        classifications=classifications,
    )


def derive_status(
    classifications: list[DocumentClassification], config: RiskBandConfiguration
) -> ClaimStatus:
    severities = [
        config.severity_of(c.label) if c.label is not None else None
        for c in classifications
    ]
    if any(c.failed for c in classifications) or Severity.HIGH in severities:
        return ClaimStatus.REJECTED
    needs_review = any(
        not c.failed and (severity is None or severity is Severity.MIDDLE)
        for c, severity in zip(classifications, severities)
    )
    if needs_review:
        return ClaimStatus.UNDER_REVIEW
    if Severity.LOW in severities:
        return ClaimStatus.APPROVED
    return ClaimStatus.UNDER_REVIEW
