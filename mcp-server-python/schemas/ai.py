"""Pydantic schemas for the AI-assisted tools (fit evaluation, cover letters, interviews, CVs, chatbot)."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import field_validator

from schemas.common import (
    BackendModel,
    Identifier,
    JobIdRequest,
    StrictIgnoreRequest,
    validate_non_empty_str,
)

InterviewType = Literal["Technical", "Behavioral"]

DEFAULT_INTERVIEW_TYPE = "Technical"


class JobContextRequest(StrictIgnoreRequest):
    """Job description fields shared by the AI generation tools."""

    job_title: str
    company: Optional[str] = None
    description: Optional[str] = None
    required_skills: Optional[str] = None

    @field_validator("job_title")
    @classmethod
    def validate_job_title(cls, value: str) -> str:
        return validate_non_empty_str(value)

    def job_payload(self) -> dict[str, Any]:
        """Backend ``job`` object; unsupplied optional fields are omitted."""
        job: dict[str, Any] = {"name": self.job_title}
        if self.company is not None:
            job["companyName"] = self.company
        if self.description is not None:
            job["description"] = self.description
        if self.required_skills is not None:
            job["requiredSkills"] = self.required_skills
        return job


class EvaluateJobFitRequest(JobContextRequest):
    description: str
    job_id: Optional[str] = None


class GenerateCoverLetterRequest(JobContextRequest):
    description: str
    job_id: Optional[str] = None


class GenerateInterviewQuestionsRequest(JobContextRequest):
    interview_type: InterviewType = DEFAULT_INTERVIEW_TYPE


class ConductMockInterviewRequest(JobIdRequest):
    interview_type: InterviewType = DEFAULT_INTERVIEW_TYPE


class CoffeeChatSuggestionsRequest(StrictIgnoreRequest):
    receiver_id: str


class GenerateCvRequest(StrictIgnoreRequest):
    """Request schema for generate_cv."""

    template: Optional[str] = None
    job_title: Optional[str] = None
    job_description: Optional[str] = None

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.template:
            body["template"] = self.template
        if self.job_title:
            body["jobTitle"] = self.job_title
        if self.job_description:
            body["jobDescription"] = self.job_description
        return body


class GenerateAndStoreCvRequest(GenerateCvRequest):
    name: Optional[str] = None

    def body(self) -> dict[str, Any]:
        body = super().body()
        if self.name:
            body["name"] = self.name
        return body


class StoredDocument(BackendModel):
    id: Optional[Identifier] = None
    name: Optional[str] = None


class ChatRequest(StrictIgnoreRequest):
    """Request schema for chat."""

    message: str
    conversation_id: Optional[str] = None

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        return validate_non_empty_str(value)


class ChatReply(BackendModel):
    response: Optional[Any] = None
    conversation_id: Optional[Identifier] = None
