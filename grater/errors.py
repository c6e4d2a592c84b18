"""
Error Types Module

Errors raised while starting grater or moving the cursor.
"""

from typing import Optional


class GraterError(Exception):
    """Base class for grater errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class MonitorUnavailableError(GraterError):
    """Raised when the primary monitor cannot be queried."""

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__("Could not acquire monitor handle.", cause)


class WindowCreationError(GraterError):
    """Raised when the application window cannot be created."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Error while creating window: {cause}", cause)


class CursorMoveError(GraterError):
    """Raised when the cursor could not be moved."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Could not move mouse cursor: {cause}", cause)


class ConfigurationError(GraterError):
    """Raised when the configuration holds unusable values."""
