"""Convert Pydantic validation errors to project ToolError contract."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from models.errors import ToolError, create_response_error, create_validation_error


def _loc_to_field(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc if part != "__root__"]
    return ".".join(parts)


def _clean_pydantic_message(message: str) -> str:
    if message.startswith("Value error, "):
        return message[len("Value error, ") :]
    return message


def _describe_first_issue(error: ValidationError, default: str) -> str:
    issues = error.errors()
    if not issues:
        return default

    first = issues[0]
    field = _loc_to_field(first.get("loc", ()))
    message = _clean_pydantic_message(first.get("msg", default))

    if field:
        return f"Invalid {field}: {message}"
    return message


def map_pydantic_validation_error(error: ValidationError) -> ToolError:
    """Map a request ValidationError to a VALIDATION_ERROR ToolError."""
    return create_validation_error(_describe_first_issue(error, "Invalid input"))


def map_response_validation_error(error: ValidationError) -> ToolError:
    """Map a backend payload ValidationError to a RESPONSE_ERROR ToolError."""
    return create_response_error(
        _describe_first_issue(error, "Malformed response"), original_error=error
    )
