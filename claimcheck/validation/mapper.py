"""Maps raw validator responses into ValidationPayload.

The validators answer with Spanish keys (``riesgo``, ``prioritarias`` ...);
English keys are accepted as well. All defaulting for this response shape
lives here.
"""

import json
from typing import Any

from claimcheck.validation.models import (
    Finding,
    Findings,
    RiskAssessment,
    ValidationPayload,
)

_RISK_KEYS = ("risk", "riesgo")
_MESSAGE_KEYS = ("message", "mensaje")
_LEVEL_KEYS = ("level", "nivel")
_FINDING_GROUPS: dict[str, tuple[str, ...]] = {
    "primary": ("primary", "prioritarias"),
    "secondary": ("secondary", "secundarias"),
    "additional": ("additional", "adicionales"),
}


def _first(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def map_validation_response(data: dict[str, Any]) -> ValidationPayload:
    """Build a ValidationPayload from a validator JSON object."""
    message = _first(data, _MESSAGE_KEYS)
    return ValidationPayload(
        risk=_map_risk(_first(data, _RISK_KEYS)),
        message=message if isinstance(message, str) else "",
        raw=data,
    )


def _map_risk(raw: Any) -> RiskAssessment | None:
    """A risk object without a numeric score counts as missing."""
    if not isinstance(raw, dict):
        return None
    score = raw.get("score")
    if not _is_number(score):
        return None
    level = _first(raw, _LEVEL_KEYS)
    return RiskAssessment(
        score=float(score),
        level=level if isinstance(level, str) else "",
        findings=_map_findings(raw),
    )


def _map_findings(risk: dict[str, Any]) -> Findings:
    container = risk.get("findings")
    source = container if isinstance(container, dict) else risk
    groups = {
        name: _map_finding_list(_first(source, keys))
        for name, keys in _FINDING_GROUPS.items()
    }
    return Findings(**groups)


def _map_finding_list(raw: Any) -> list[Finding]:
    if not isinstance(raw, list):
        return []
    return [_map_finding(item) for item in raw if isinstance(item, dict)]


def _map_finding(raw: dict[str, Any]) -> Finding:
    detail = raw.get("detail", raw.get("detalle", ""))
    penalty = raw.get("penalty", raw.get("penalizacion", 0))
    return Finding(
        check=str(raw.get("check", "")),
        detail=detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False),
        penalty=float(penalty) if _is_number(penalty) else 0.0,
    )
