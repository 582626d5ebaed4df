"""Pydantic schemas for the coffee chat networking tools."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import field_validator

from schemas.common import (
    BackendModel,
    Identifier,
    LimitMixin,
    StrictIgnoreRequest,
    validate_non_empty_str,
)

RequestDirection = Literal["sent", "received"]
RequestAction = Literal["accept", "decline"]


class FindCoffeeContactsRequest(LimitMixin, StrictIgnoreRequest):
    """Request schema for find_coffee_contacts."""

    search: Optional[str] = None
    industry: Optional[str] = None
    help_topics: Optional[list[str]] = None


class SendCoffeeChatRequest(StrictIgnoreRequest):
    """Request schema for send_coffee_chat_request."""

    receiver_id: str
    message: str

    @field_validator("receiver_id", "message")
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        return validate_non_empty_str(value)


class GetCoffeeChatRequestsRequest(StrictIgnoreRequest):
    direction: RequestDirection = "sent"

    @field_validator("direction", mode="before")
    @classmethod
    def coerce_direction_default(cls, value: Any) -> Any:
        return "sent" if value is None else value


class UpdateCoffeeProfileRequest(StrictIgnoreRequest):
    """Request schema for update_coffee_profile; only supplied fields are sent."""

    headline: Optional[str] = None
    bio: Optional[str] = None
    industry: Optional[str] = None
    help_topics: Optional[list[str]] = None
    years_experience: Optional[int] = None
    is_available: Optional[bool] = None

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.headline:
            body["headline"] = self.headline
        if self.bio:
            body["bio"] = self.bio
        if self.industry:
            body["industry"] = self.industry
        if self.help_topics:
            body["helpTopics"] = self.help_topics
        if self.years_experience is not None:
            body["yearsExperience"] = self.years_experience
        if self.is_available is not None:
            body["isAvailable"] = self.is_available
        return body


class CoffeeChatIdRequest(StrictIgnoreRequest):
    request_id: str

    @field_validator("request_id")
    @classmethod
    def validate_request_id(cls, value: str) -> str:
        return validate_non_empty_str(value)


class RespondCoffeeChatRequest(CoffeeChatIdRequest):
    action: RequestAction


class SendCoffeeChatMessageRequest(CoffeeChatIdRequest):
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return validate_non_empty_str(value)


class CoffeeContact(BackendModel):
    user_id: Optional[Identifier] = None
    display_name: Optional[str] = None
    headline: Optional[str] = None
    industry: Optional[str] = None
    help_topics: Optional[list[str]] = None
    years_experience: Optional[int] = None
    bio: Optional[str] = None


class CoffeeChatRequestItem(BackendModel):
    id: Optional[Identifier] = None
    sender_display_name: Optional[str] = None
    receiver_display_name: Optional[str] = None
    status: Optional[Any] = None
    message: Optional[str] = None
    created_on_utc: Optional[str] = None
    scheduled_date_utc: Optional[str] = None


class CoffeeProfile(BackendModel):
    display_name: Optional[str] = None
    headline: Optional[str] = None
    bio: Optional[str] = None
    industry: Optional[str] = None
    help_topics: Optional[list[str]] = None
    years_experience: Optional[int] = None
    is_available: Optional[bool] = None


class CoffeeChatMessage(BackendModel):
    id: Optional[Identifier] = None
    content: Optional[str] = None
    sender_display_name: Optional[str] = None
    created_on_utc: Optional[str] = None


class CoffeeChatStats(BackendModel):
    total_sent: Optional[int] = None
    total_received: Optional[int] = None
    accepted: Optional[int] = None
    declined: Optional[int] = None
    pending: Optional[int] = None
