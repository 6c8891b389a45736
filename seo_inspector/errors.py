class AnalysisError(Exception):
    """Raised when a page could not be analyzed. The message is user-facing."""
