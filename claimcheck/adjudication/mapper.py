"""Maps adjudication workflow responses into AdjudicationResult.

Every "absent field -> neutral value" rule for this response shape is here.
"""

import math
from typing import Any

from claimcheck.adjudication.models import (
    AdjudicationResult,
    ApprovedItem,
    DiagnosisSummary,
    PatientSummary,
)


def map_adjudication_response(raw: Any) -> AdjudicationResult:
    """Build an AdjudicationResult; never fails on missing or mistyped fields.

    Workflow engines may wrap the answer in a list; the first element is used.
    """
    if isinstance(raw, list):
        raw = raw[0] if raw else None
    if not isinstance(raw, dict) or not raw:
        return AdjudicationResult()

    output = _dict(raw.get("output"))
    return AdjudicationResult(
        patient=_patient(_dict(output.get("patient"))),
        diagnosis=_diagnosis(_dict(output.get("diagnosis"))),
        approved_items=_items(output.get("approvedItems")),
        total_reimbursement=_number(output.get("totalReimbursement")),
        justification=_text(output.get("justification")),
        score_total=_number(output.get("scoreTotal")),
        is_success=raw.get("IsSuccess") is True,
        message=_text(raw.get("Output")),
        has_output=bool(output),
    )


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _number(value: Any) -> float:
    """Finite float from a number or numeric string; 0.0 otherwise."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return 0.0
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _patient(raw: dict[str, Any]) -> PatientSummary:
    return PatientSummary(
        name=_text(raw.get("name")),
        policy_number=_text(raw.get("policyNumber")),
    )


def _diagnosis(raw: dict[str, Any]) -> DiagnosisSummary:
    return DiagnosisSummary(
        code=_text(raw.get("code")),
        description=_text(raw.get("description")),
    )


def _items(raw: Any) -> list[ApprovedItem]:
    if not isinstance(raw, list):
        return []
    return [
        ApprovedItem(
            item=_text(entry.get("item")),
            quantity=_number(entry.get("quantity")),
            total=_number(entry.get("total")),
        )
        for entry in raw
        if isinstance(entry, dict)
    ]
