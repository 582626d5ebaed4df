"""Pydantic schemas for documents, subscription and scraping statistics."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import field_validator

from schemas.common import BackendModel, Identifier, StrictIgnoreRequest, validate_non_empty_str

DocumentListType = Literal["all", "cvs", "cover-letters"]
DocumentType = Literal["cv", "cover-letter"]


class GetDocumentsRequest(StrictIgnoreRequest):
    type: DocumentListType = "all"

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type_default(cls, value: Any) -> Any:
        return "all" if value is None else value


class DocumentIdRequest(StrictIgnoreRequest):
    document_id: str

    @field_validator("document_id")
    @classmethod
    def validate_document_id(cls, value: str) -> str:
        return validate_non_empty_str(value)


class DeleteDocumentRequest(DocumentIdRequest):
    type: DocumentType


class RenameDocumentRequest(DocumentIdRequest):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return validate_non_empty_str(value)


class DocumentSummary(BackendModel):
    id: Optional[Identifier] = None
    name: Optional[str] = None
    created_on_utc: Optional[str] = None


class Document(DocumentSummary):
    content: Optional[str] = None
    type: Optional[str] = None
    updated_on_utc: Optional[str] = None


class FeatureAccessRequest(StrictIgnoreRequest):
    feature_name: str

    @field_validator("feature_name")
    @classmethod
    def validate_feature_name(cls, value: str) -> str:
        return validate_non_empty_str(value)


class SubscriptionStatus(BackendModel):
    plan: Optional[str] = None
    status: Optional[str] = None
    current_period_end: Optional[str] = None
    trial_end: Optional[str] = None
    features: Optional[list[str]] = None


class SubscriptionPlan(BackendModel):
    name: Optional[str] = None
    price: Optional[float] = None
    interval: Optional[str] = None
    description: Optional[str] = None
    features: Optional[list[str]] = None


class FeatureAccess(BackendModel):
    has_access: Optional[bool] = None
    reason: Optional[str] = None


class Payment(BackendModel):
    """A charge; ``amount`` is in the currency's minor unit (cents)."""

    amount: float = 0
    currency: Optional[str] = None
    status: Optional[str] = None
    created_on_utc: Optional[str] = None
    description: Optional[str] = None


class WebsiteCount(BackendModel):
    name: Optional[str] = None
    job_count: Optional[int] = None


class ScrapingStatistics(BackendModel):
    total_jobs_scraped: Optional[int] = None
    total_sessions: Optional[int] = None
    websites: Optional[list[WebsiteCount]] = None
