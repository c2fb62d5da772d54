"""Custom exceptions for GridTint."""


class GridTintError(Exception):
    """Base exception for all GridTint errors."""

    pass


class InvalidInputError(GridTintError):
    """Raised when a color, cell block or coordinate fails validation."""

    pass


class HostAccessError(GridTintError):
    """Raised when the host spreadsheet cannot resolve or read a range."""

    pass


class ConfigurationError(GridTintError):
    """Raised when configuration is invalid."""

    pass


class ProcessingError(GridTintError):
    """Raised to callers of the public entry point when filtering fails.

    Carries a fixed, user-facing message only. The underlying cause is logged
    and never attached.
    """

    DEFAULT_MESSAGE = "Unable to filter cells by font color."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.DEFAULT_MESSAGE)
