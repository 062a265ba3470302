"""Domain errors."""


class ValidationError(ValueError):
    """Raised when entity input is rejected before construction."""
