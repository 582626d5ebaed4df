"""Pydantic schemas for dashboard, notification and community comment tools."""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from schemas.common import (
    BackendModel,
    Identifier,
    LimitMixin,
    Page,
    StrictIgnoreRequest,
    validate_non_empty_str,
)


# Dashboard

class JobStatistics(BackendModel):
    total: Optional[int] = None
    applied: Optional[int] = None
    interview: Optional[int] = None
    offer: Optional[int] = None
    rejected: Optional[int] = None
    starred: Optional[int] = None


class ScrapingMetrics(BackendModel):
    total_jobs_scraped: Optional[int] = None
    total_websites: Optional[int] = None


class DocumentStatistics(BackendModel):
    total_cvs: Optional[int] = None
    total_cover_letters: Optional[int] = None


class PortfolioMetrics(BackendModel):
    visits_this_month: Optional[int] = None


class DashboardStatistics(BackendModel):
    job_statistics: Optional[JobStatistics] = None
    scraping_metrics: Optional[ScrapingMetrics] = None
    document_statistics: Optional[DocumentStatistics] = None
    portfolio_metrics: Optional[PortfolioMetrics] = None


# Notifications

class GetNotificationsRequest(LimitMixin, StrictIgnoreRequest):
    """Request schema for get_notifications."""


class NotificationIdRequest(StrictIgnoreRequest):
    notification_id: str

    @field_validator("notification_id")
    @classmethod
    def validate_notification_id(cls, value: str) -> str:
        return validate_non_empty_str(value)


class Notification(BackendModel):
    id: Optional[Identifier] = None
    title: Optional[str] = None
    message: Optional[str] = None
    is_read: Optional[bool] = None
    created_on_utc: Optional[str] = None


class NotificationPage(Page[Notification]):
    unread_count: Optional[int] = None


# Community comments

class GetCommunityCommentsRequest(LimitMixin, StrictIgnoreRequest):
    """Request schema for get_community_comments (page/pageSize pagination)."""

    page: int = 1

    @field_validator("page", mode="before")
    @classmethod
    def coerce_page_default(cls, value):
        if value is None or value == 0:
            return 1
        return value

    @field_validator("page")
    @classmethod
    def validate_page(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"{value} must be a positive integer")
        return value


class CommentIdRequest(StrictIgnoreRequest):
    comment_id: str

    @field_validator("comment_id")
    @classmethod
    def validate_comment_id(cls, value: str) -> str:
        return validate_non_empty_str(value)


class CreateCommentRequest(StrictIgnoreRequest):
    content: str
    parent_id: Optional[str] = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return validate_non_empty_str(value)


class UpdateCommentRequest(CommentIdRequest):
    content: str


class Comment(BackendModel):
    id: Optional[Identifier] = None
    author_display_name: Optional[str] = None
    content: Optional[str] = None
    reply_count: Optional[int] = None
    created_on_utc: Optional[str] = None


class CommentThread(Comment):
    replies: Optional[list[Comment]] = None
