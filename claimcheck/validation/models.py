from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Finding:
    """A single check reported by a validator."""

    check: str
    detail: str = ""
    penalty: float = 0.0


@dataclass(frozen=True)
class Findings:
    primary: list[Finding] = field(default_factory=list)
    secondary: list[Finding] = field(default_factory=list)
    additional: list[Finding] = field(default_factory=list)


@dataclass(frozen=True)
class RiskAssessment:
    """Risk object of a validation payload."""

    score: float
    level: str = ""
    findings: Findings = field(default_factory=Findings)


@dataclass(frozen=True)
class ValidationPayload:
    """Structured validator response; ``raw`` keeps the body as received."""

    risk: RiskAssessment | None
    message: str = ""
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one document: a payload or an error, never both."""

    metadata: dict[str, object]
    payload: ValidationPayload | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        if (self.payload is None) == (self.error_message is None):
            raise ValueError(
                "ValidationOutcome requires exactly one of payload or error_message"
            )

    @property
    def index(self) -> int:
        value = self.metadata.get("index", 0)
        return value if isinstance(value, int) else 0

    @property
    def filename(self) -> str:
        return str(self.metadata.get("filename", ""))

    @property
    def succeeded(self) -> bool:
        return self.payload is not None

    def to_dict(self) -> dict[str, object]:
        """Shape sent downstream: metadata plus validation or validationError."""
        data: dict[str, object] = dict(self.metadata)
        if self.payload is not None:
            data["validation"] = self.payload.raw
        else:
            data["validationError"] = self.error_message
        return data
