"""Validates raw band mappings before they can be used for classification."""

from typing import Any

from claimcheck.risk.exceptions import RiskConfigurationError
from claimcheck.risk.models import (
    DEFAULT_BANDS,
    SCALE_MAX,
    SCALE_MIN,
    RiskBand,
    RiskBandConfiguration,
)


def validate_bands(raw: Any) -> RiskBandConfiguration:
    """Check a ``{label: [min, max]}`` mapping and build a configuration.

    Ranges must be integers with ``0 <= min < max <= 100`` and must not
    overlap; bands sharing an endpoint overlap.

    Raises:
        RiskConfigurationError: on any violation. Nothing is merged or repaired.
    """
    if not isinstance(raw, dict) or not raw:
        raise RiskConfigurationError("Risk bands must be a non-empty mapping of label to [min, max]")
    bands = sorted(
        (_build_band(label, bounds) for label, bounds in raw.items()),
        key=lambda band: band.min,
    )
    for current, following in zip(bands, bands[1:]):
        if current.max >= following.min:
            raise RiskConfigurationError(
                f"Risk bands '{current.label}' and '{following.label}' overlap"
            )
    return RiskBandConfiguration(bands=tuple(bands))


def _build_band(label: Any, bounds: Any) -> RiskBand:
    if not isinstance(label, str) or not label.strip():
        raise RiskConfigurationError(f"Risk band label must be a non-empty string, got {label!r}")
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        raise RiskConfigurationError(f"Risk band '{label}' must be a [min, max] pair")
    low, high = bounds
    if not _is_int(low) or not _is_int(high):
        raise RiskConfigurationError(f"Risk band '{label}' bounds must be integers")
    if low >= high:
        raise RiskConfigurationError(
            f"Risk band '{label}' has an invalid range: {low} must be lower than {high}"
        )
    if low < SCALE_MIN or high > SCALE_MAX:
        raise RiskConfigurationError(
            f"Risk band '{label}' must stay within {SCALE_MIN}-{SCALE_MAX}"
        )
    return RiskBand(label=label, min=low, max=high)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def default_configuration() -> RiskBandConfiguration:
    return validate_bands(DEFAULT_BANDS)
