class Match3Error(Exception):
    """Base class for match engine failures."""


class OutOfBoundsError(Match3Error, IndexError):
    """Raised when a grid index or (row, col) position falls outside the board."""

    def __init__(self, index, size: int, message: str | None = None):
        super().__init__(message or f"index {index} outside board of {size} cells")
        self.index = index
        self.size = size


class ShuffleExhaustedError(Match3Error, RuntimeError):
    """Raised when no acceptable layout was found within the attempt budget.

    The board passed in is left untouched, so callers may retry or keep it.
    """

    def __init__(self, attempts: int, message: str | None = None):
        super().__init__(message or f"no acceptable layout after {attempts} attempts")
        self.attempts = attempts
