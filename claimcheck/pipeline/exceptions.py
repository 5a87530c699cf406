class PipelineError(Exception):
    """Base exception for claim pipeline runs."""


class PipelineCancelledError(PipelineError):
    """Raised when a run is cancelled before all documents were validated."""
