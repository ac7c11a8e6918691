class InvalidArgument(ValueError):
    """Raised when an outage identifier is not a positive integer."""
