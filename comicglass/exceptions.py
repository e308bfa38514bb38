"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    status_code: int = 500
    message: str = "internal server error"


class PathNotExistError(BaseAppError):
    """Raised when a requested path escapes the library, is missing, or has the wrong type."""

    status_code = 400
    message = "Path does not exist"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class FilesystemError(BaseAppError):
    """Exception raised for filesystem failures other than a missing path."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
