class FieldMapValidationError(Exception):
    """Raised when an extracted field map breaks its category schema."""
