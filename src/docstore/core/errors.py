"""Domain errors"""


class InvalidArgumentError(ValueError):
    """A required argument was missing (None). Treat as a programming error."""
