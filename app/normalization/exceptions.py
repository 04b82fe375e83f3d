class NormalizationError(Exception):
    """Raised when report text cannot be normalized."""
