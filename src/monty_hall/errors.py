class InvalidArgument(ValueError):
    """Raised when a caller passes an out-of-range value (round count, door)."""


class InvalidState(RuntimeError):
    """Raised when a game object violates its own invariants."""
