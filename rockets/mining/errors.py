class MiningError(Exception):
    """Base class for errors raised by launch analytics queries."""
    pass


class NullArgumentError(MiningError, TypeError):
    """Raised when a required query argument is missing."""
    pass


class InvalidArgumentError(MiningError, ValueError):
    """Raised when a query argument is out of range for the current snapshot."""
    pass
