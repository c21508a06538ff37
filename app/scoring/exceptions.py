class AnalysisError(RuntimeError):
    """Raised when a resume analysis cannot be completed."""
