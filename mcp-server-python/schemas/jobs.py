"""Pydantic schemas for the job tracking tools."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import field_validator

from schemas.common import (
    BackendModel,
    CreatedResource,
    Identifier,
    JobIdRequest,
    LimitMixin,
    StrictIgnoreRequest,
    validate_non_empty_str,
)

SaveableStatus = Literal[
    "saved", "applied", "initial_interview", "final_interview", "offered", "rejected"
]
FilterStatus = Literal[
    "saved", "applied", "initial_interview", "final_interview", "offered", "rejected", "expired"
]
BulkAction = Literal["delete", "reject", "proceed"]


class SaveJobRequest(StrictIgnoreRequest):
    """Request schema for save_job."""

    title: str
    company: str
    location: Optional[str] = None
    job_url: Optional[str] = None
    description: Optional[str] = None
    required_skills: Optional[str] = None
    status: Optional[SaveableStatus] = None
    is_starred: Optional[bool] = None

    @field_validator("title", "company")
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        return validate_non_empty_str(value)


class GetJobsRequest(LimitMixin, StrictIgnoreRequest):
    """Request schema for get_jobs."""

    search: Optional[str] = None
    status: Optional[FilterStatus] = None
    starred_only: Optional[bool] = None


class UpdateJobStatusRequest(JobIdRequest):
    """Request schema for update_job_status.

    ``status`` is a free string: unknown values are answered with the list of
    valid options rather than rejected as invalid input.
    """

    status: str


class StarJobRequest(JobIdRequest):
    is_starred: bool


class AddJobNoteRequest(JobIdRequest):
    content: str


class JobNoteRequest(JobIdRequest):
    note_id: str


class UpdateJobNoteRequest(JobNoteRequest):
    content: str


class BulkUpdateJobsRequest(StrictIgnoreRequest):
    """Request schema for bulk_update_jobs."""

    job_ids: list[str]
    action: str

    @field_validator("job_ids")
    @classmethod
    def validate_job_ids(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one job ID is required")
        return value


class JobNote(BackendModel):
    id: Optional[Identifier] = None
    content: Optional[str] = None
    created_on_utc: Optional[str] = None


class JobSummary(BackendModel):
    """One row of the job listing."""

    id: Optional[Identifier] = None
    name: Optional[str] = None
    company_name: Optional[str] = None
    status: Optional[Any] = None
    is_starred: Optional[bool] = None
    location: Optional[str] = None


class JobDetail(JobSummary):
    """Full job record returned by GET /api/Job/{id}."""

    employment_types: Optional[Any] = None
    work_arrangement: Optional[Any] = None
    job_url: Optional[str] = None
    description: Optional[str] = None
    required_skills: Optional[str] = None
    notes: Optional[list[JobNote]] = None
    created_on_utc: Optional[str] = None
    status_updated_on_utc: Optional[str] = None


class JobEvaluation(BackendModel):
    """CV-to-job fit evaluation."""

    overall_score: Optional[Union[int, float]] = None
    summary: Optional[str] = None
    strengths: Optional[list[str]] = None
    weaknesses: Optional[list[str]] = None
    recommendations: Optional[list[str]] = None
