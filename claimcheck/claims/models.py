from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from claimcheck.risk.aggregator import ClaimStatus


@dataclass(frozen=True)
class ClaimContext:
    """Claim data supplied by the intake form."""

    patient_info: dict[str, Any] = field(default_factory=dict)
    provider_details: dict[str, Any] = field(default_factory=dict)
    diagnosis: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClaimContext":
        """Build from ``{patientInfo, providerDetails, diagnosis}``.

        Raises:
            ValueError: if ``diagnosis.totalAmount`` is present but not numeric.
        """
        context = cls(
            patient_info=dict(data.get("patientInfo") or {}),
            provider_details=dict(data.get("providerDetails") or {}),
            diagnosis=dict(data.get("diagnosis") or {}),
        )
        _ = context.requested_amount
        return context

    @property
    def requested_amount(self) -> Decimal:
        raw = self.diagnosis.get("totalAmount")
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return Decimal("0")
        if isinstance(raw, bool):
            raise ValueError("Requested amount must be numeric")
        try:
            amount = Decimal(str(raw).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Requested amount must be numeric, got {raw!r}") from exc
        if not amount.is_finite():
            raise ValueError(f"Requested amount must be numeric, got {raw!r}")
        return amount

    @property
    def provider(self) -> str:
        for key in ("name", "providerName", "provider"):
            value = self.provider_details.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "patientInfo": self.patient_info,
            "providerDetails": self.provider_details,
            "diagnosis": self.diagnosis,
        }


@dataclass(frozen=True)
class ClaimRecord:
    """Row persisted to the system of record for one pipeline run."""

    provider: str
    status: ClaimStatus
    requested_amount: Decimal
    currency: str
    observations: str


def describe_evaluation(document_count: int) -> str:
    return f"{document_count} document(s) evaluated"
