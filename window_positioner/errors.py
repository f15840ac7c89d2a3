"""
Error handling for the window positioner.

Domain failures (window not found, backend failure) are absorbed at the
component boundary and turned into negative results. Only malformed requests
surface to the transport as exceptions.
"""

import json
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for the window positioner.

    - 1000-1099: Lookup errors
    - 1100-1199: Window-management backend errors
    - 1200-1299: Request errors
    - 1300-1399: Configuration errors
    """

    # Lookup errors (1000-1099)
    WINDOW_NOT_FOUND = 1000
    NO_ACTIVE_WINDOW = 1001

    # Backend errors (1100-1199)
    BACKEND_CONNECT_FAILED = 1100
    BACKEND_COMMAND_FAILED = 1101
    BACKEND_QUERY_FAILED = 1102

    # Request errors (1200-1299)
    UNKNOWN_OPERATION = 1200
    INVALID_ARGUMENTS = 1201

    # Configuration errors (1300-1399)
    CONFIG_LOAD_FAILED = 1300


class WindowPositionerError(Exception):
    """Base exception for window positioner errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize window positioner error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for logging and diagnostics."""
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.context:
            result["context"] = self.context

        return result


class WindowNotFoundError(WindowPositionerError):
    """No window matched the selector."""

    def __init__(self, description: str):
        """
        Initialize window-not-found error.

        Args:
            description: Human description of the selector, e.g.
                'title containing "firefox"'
        """
        super().__init__(
            code=ErrorCode.WINDOW_NOT_FOUND,
            message=f"Window with {description} not found",
            context={"selector": description}
        )


class NoActiveWindowError(WindowPositionerError):
    """Neither a focused window nor a normal fallback window exists."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_ACTIVE_WINDOW,
            message="No active window found"
        )


class BackendError(WindowPositionerError):
    """Window-management backend call failed."""

    def __init__(
        self,
        operation: str,
        reason: str,
        code: ErrorCode = ErrorCode.BACKEND_COMMAND_FAILED
    ):
        """
        Initialize backend error.

        Args:
            operation: Backend operation that failed
            reason: Reason for failure
            code: Connect, query or command failure
        """
        super().__init__(
            code=code,
            message=f"Backend {operation} failed: {reason}",
            context={"operation": operation, "reason": reason}
        )


class InvalidRequestError(WindowPositionerError):
    """Malformed request: unknown operation or wrong argument count/type."""

    def __init__(self, code: ErrorCode, message: str, operation: Optional[str] = None):
        super().__init__(
            code=code,
            message=message,
            context={"operation": operation} if operation else None
        )


class ConfigError(WindowPositionerError):
    """Configuration loading or validation error."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            context={"file_path": file_path, "reason": reason}
        )


def error_payload(message: str) -> Dict[str, str]:
    """Build the error payload shape returned by introspection operations."""
    return {"error": message}


def error_json(message: str) -> str:
    """Serialized form of error_payload()."""
    return json.dumps(error_payload(message))
