"""Shared schema primitives for MCP tool requests and backend responses."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from utils.pydantic_error_mapper import (
    map_pydantic_validation_error,
    map_response_validation_error,
)

DataT = TypeVar("DataT")
ModelT = TypeVar("ModelT", bound=BaseModel)

# Backend identifiers arrive as GUID strings or integers
Identifier = Union[str, int]

DEFAULT_PAGE_SIZE = 10


def validate_non_empty_str(value: str) -> str:
    """Validate string fields that cannot be empty/whitespace."""
    if not value.strip():
        raise ValueError("cannot be empty")
    return value


class StrictIgnoreRequest(BaseModel):
    """Request base with strict typing and ignored unknown fields."""

    model_config = ConfigDict(extra="ignore", strict=True)


class BackendModel(BaseModel):
    """
    Base for backend payloads.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields are ignored so backend additions never break a tool.
    """

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class Envelope(BackendModel, Generic[DataT]):
    """Standard backend response wrapper."""

    data: Optional[DataT] = None
    message: Optional[str] = None
    error_code: Optional[Any] = None
    is_success: Optional[bool] = None

    def domain_error(self) -> Optional[str]:
        """Return the failure text when the envelope carries an error code."""
        if not self.error_code:
            return None
        return self.message or str(self.error_code)


class Page(BackendModel, Generic[DataT]):
    """Paged list payload (``items`` plus counters)."""

    items: Optional[list[DataT]] = None
    total_count: Optional[int] = None


class CreatedResource(BackendModel):
    """Payload returned by create endpoints."""

    id: Optional[Identifier] = None


class LimitMixin(BaseModel):
    """Reusable page-size field; missing or zero means the default of 10."""

    limit: int = DEFAULT_PAGE_SIZE

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit_default(cls, value: Any) -> Any:
        if value is None or value == 0:
            return DEFAULT_PAGE_SIZE
        return value

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"{value} must be a positive integer")
        return value


class JobIdRequest(StrictIgnoreRequest):
    """Request carrying a single job identifier."""

    job_id: str

    @field_validator("job_id")
    @classmethod
    def validate_job_id(cls, value: str) -> str:
        return validate_non_empty_str(value)


def validate_request(model_cls: type[ModelT], args: dict[str, Any]) -> ModelT:
    """Validate tool arguments, raising a VALIDATION_ERROR ToolError on failure."""
    try:
        return model_cls.model_validate(args)
    except ValidationError as e:
        raise map_pydantic_validation_error(e) from e


def validate_response(model_cls: type[ModelT], payload: Any) -> ModelT:
    """Validate a backend payload, raising a RESPONSE_ERROR ToolError on failure."""
    if payload is None:
        payload = {}
    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        raise map_response_validation_error(e) from e
