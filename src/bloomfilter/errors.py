class InvalidArgument(ValueError):
    """Raised when a filter is constructed with unusable parameters."""
