class AdjudicationError(Exception):
    """Raised when the adjudication workflow cannot be reached or refuses the claim."""
