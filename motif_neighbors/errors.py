"""Exceptions raised by the query engine and the dataset loader."""


class MotifQueryError(Exception):
    """Base class for every error raised by motif_neighbors."""


class NotFoundError(MotifQueryError, KeyError):
    """A referenced item code does not exist in the relevant store."""

    def __init__(self, code: str, store: str = "store"):
        self.code = code
        self.store = store
        super().__init__(f"{code!r} not found in {store}")

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return self.args[0]


class DimensionMismatchError(MotifQueryError, ValueError):
    """Two vectors compared together have different lengths."""

    def __init__(self, left: int, right: int, context: str = ""):
        self.left = left
        self.right = right
        message = f"Vectors must be of the same length ({left} != {right})"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


class InvalidCountError(MotifQueryError, ValueError):
    """A neighbour count that is negative and not the -1 'all' sentinel."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Invalid neighbour count {count}: use -1 for all, or a value >= 0"
        )


class DatasetError(MotifQueryError):
    """Input files are missing, malformed or mutually inconsistent."""
