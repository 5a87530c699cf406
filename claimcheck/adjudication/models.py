from dataclasses import dataclass, field


@dataclass(frozen=True)
class PatientSummary:
    name: str = ""
    policy_number: str = ""


@dataclass(frozen=True)
class DiagnosisSummary:
    code: str = ""
    description: str = ""


@dataclass(frozen=True)
class ApprovedItem:
    item: str = ""
    quantity: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class AdjudicationResult:
    """Display model of the adjudication workflow's answer.

    ``has_output`` is False when the workflow answered successfully but
    without a result body.
    """

    patient: PatientSummary = field(default_factory=PatientSummary)
    diagnosis: DiagnosisSummary = field(default_factory=DiagnosisSummary)
    approved_items: list[ApprovedItem] = field(default_factory=list)
    total_reimbursement: float = 0.0
    justification: str = ""
    score_total: float = 0.0
    is_success: bool = False
    message: str = ""
    has_output: bool = False
