from claimcheck.risk.models import UNKNOWN_LABEL, RiskBandConfiguration


def classify_score(score: float, config: RiskBandConfiguration) -> str:
    """Return the label of the band containing ``score``.

    A score above the configured maximum (any score over 100 included)
    resolves to the most severe label. A score that falls in a gap or below
    the first band yields ``UNKNOWN_LABEL``.
    """
    for band in config.bands:
        if band.contains(score):
            return band.label
    if score > config.maximum:
        return config.most_severe.label
    return UNKNOWN_LABEL
