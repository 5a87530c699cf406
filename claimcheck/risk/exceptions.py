class RiskConfigurationError(Exception):
    """Raised when a risk band configuration is invalid or cannot be loaded."""
