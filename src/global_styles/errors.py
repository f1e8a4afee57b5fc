"""Error types."""


class GlobalStylesError(Exception):
    """Base class for errors raised outside the pure CSS utilities."""


class StorageError(GlobalStylesError):
    """Raised when the option store is used incorrectly."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
