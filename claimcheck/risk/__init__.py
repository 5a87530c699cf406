from claimcheck.risk.aggregator import ClaimAssessment, ClaimStatus, aggregate
from claimcheck.risk.classifier import classify_score
from claimcheck.risk.config_client import RiskConfigClient
from claimcheck.risk.models import UNKNOWN_LABEL, RiskBandConfiguration
from claimcheck.risk.validator import default_configuration, validate_bands

__all__ = [
    "UNKNOWN_LABEL",
    "ClaimAssessment",
    "ClaimStatus",
    "RiskBandConfiguration",
    "RiskConfigClient",
    "aggregate",
    "classify_score",
    "default_configuration",
    "validate_bands",
]
