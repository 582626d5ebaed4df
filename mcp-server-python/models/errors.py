"""
Error model for the JobJourney MCP tools.

Two tiers of failure exist:

- Transport failures (non-2xx from the backend) and invalid tool input are
  raised as ``ToolError`` subclasses and surface as MCP tool errors.
- Domain failures (2xx response whose envelope carries ``errorCode``) are not
  exceptions at all; tools render them as text.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Structured error codes for the MCP tools."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_ERROR = "API_ERROR"
    RESPONSE_ERROR = "RESPONSE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ToolError(Exception):
    """Base exception for tool errors with structured error information."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        retryable: bool = False,
        original_error: Optional[Exception] = None
    ):
        """
        Initialize a tool error.

        Args:
            code: The error code
            message: Human-readable error message
            retryable: Whether the operation can be retried
            original_error: The original exception if this wraps another error
        """
        self.code = code
        self.message = message
        self.retryable = retryable
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary format for logging or structured output."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "retryable": self.retryable
            }
        }


class ApiError(ToolError):
    """
    Raised when the backend answers with a non-success HTTP status.

    The raw response body is kept verbatim (never re-parsed) so the full
    diagnostic detail reaches the caller and the logs.
    """

    def __init__(self, status_code: int, body: str, original_error: Optional[Exception] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(
            code=ErrorCode.API_ERROR,
            message=f"API error {status_code}: {body}",
            retryable=status_code >= 500 or status_code == 429,
            original_error=original_error,
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["error"]["status_code"] = self.status_code
        return data


def sanitize_stack_trace(error_msg: str) -> str:
    """
    Remove stack traces from error messages.

    Args:
        error_msg: The original error message

    Returns:
        Error message without stack trace
    """
    # Take only the first line (usually the most relevant)
    lines = error_msg.split('\n')
    if lines:
        return lines[0].strip()
    return error_msg


def create_validation_error(message: str) -> ToolError:
    """
    Create a validation error for bad tool arguments.

    Args:
        message: Description of the validation failure

    Returns:
        ToolError with VALIDATION_ERROR code
    """
    return ToolError(
        code=ErrorCode.VALIDATION_ERROR,
        message=message,
        retryable=False
    )


def create_api_error(status_code: int, body: str) -> ApiError:
    """
    Create a transport error from a non-success backend response.

    Args:
        status_code: HTTP status returned by the backend
        body: Raw response body text

    Returns:
        ApiError carrying status and body
    """
    return ApiError(status_code=status_code, body=body)


def create_response_error(message: str, original_error: Optional[Exception] = None) -> ToolError:
    """
    Create an error for a backend response that does not match its expected shape.

    Args:
        message: Description of the mismatch
        original_error: The original exception

    Returns:
        ToolError with RESPONSE_ERROR code
    """
    return ToolError(
        code=ErrorCode.RESPONSE_ERROR,
        message=f"Unexpected response from backend: {sanitize_stack_trace(message)}",
        retryable=False,
        original_error=original_error
    )


def create_internal_error(message: str, original_error: Optional[Exception] = None) -> ToolError:
    """
    Create an internal error for unexpected exceptions.

    Args:
        message: Description of the internal error
        original_error: The original exception

    Returns:
        ToolError with INTERNAL_ERROR code
    """
    sanitized_message = sanitize_stack_trace(message)

    return ToolError(
        code=ErrorCode.INTERNAL_ERROR,
        message=f"Internal error: {sanitized_message}",
        retryable=True,
        original_error=original_error
    )
