from dataclasses import dataclass
from enum import Enum

SCALE_MIN = 0
SCALE_MAX = 100
UNKNOWN_LABEL = "unknown"


class Severity(int, Enum):
    LOW = 0
    MIDDLE = 1
    HIGH = 2


@dataclass(frozen=True)
class RiskBand:
    """Labeled inclusive score range."""

    label: str
    min: int
    max: int

    def contains(self, score: float) -> bool:
        return self.min <= score <= self.max


@dataclass(frozen=True)
class RiskBandConfiguration:
    """Validated, non-overlapping bands ordered by their lower bound.

    Build instances with ``validate_bands`` so the range and overlap rules
    are always enforced.
    """

    bands: tuple[RiskBand, ...]

    @property
    def least_severe(self) -> RiskBand:
        return self.bands[0]

    @property
    def most_severe(self) -> RiskBand:
        return self.bands[-1]

    @property
    def maximum(self) -> int:
        return self.most_severe.max

    def severity_of(self, label: str) -> Severity | None:
        """Positional severity of a label; None for labels outside the configuration."""
        labels = [band.label for band in self.bands]
        if label not in labels:
            return None
        if label == self.most_severe.label:
            return Severity.HIGH
        if label == self.least_severe.label:
            return Severity.LOW
        return Severity.MIDDLE

    def as_mapping(self) -> dict[str, list[int]]:
        return {band.label: [band.min, band.max] for band in self.bands}


DEFAULT_BANDS: dict[str, list[int]] = {
    "approved": [0, 39],
    "review": [40, 69],
    "rejected": [70, 100],
}
