"""Pydantic schemas for the profile and portfolio tools."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from schemas.common import BackendModel, StrictIgnoreRequest, validate_non_empty_str


class ProfileEntry(BaseModel):
    """
    Base for profile section entries sent to the backend.

    Accepts camelCase (as documented to callers) or snake_case keys and
    serializes to camelCase without the fields that were not supplied.
    """

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SkillEntry(ProfileEntry):
    name: str


class EmploymentEntry(ProfileEntry):
    company_name: str
    title: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None


class EducationEntry(ProfileEntry):
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class ProjectEntry(ProfileEntry):
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    technologies: Optional[str] = None


class ReferenceEntry(ProfileEntry):
    name: str
    relationship: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BasicProfileFields(BaseModel):
    """Top-level profile fields; empty values are treated as not supplied."""

    model_config = ConfigDict(extra="ignore")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    headline: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None

    def basic_payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.first_name:
            body["firstName"] = self.first_name
        if self.last_name:
            body["lastName"] = self.last_name
        if self.headline:
            body["headline"] = self.headline
        if self.bio:
            body["bio"] = self.bio
        if self.location:
            body["location"] = self.location
        return body


class UpdateProfileBasicRequest(BasicProfileFields):
    """Request schema for update_profile_basic."""


class UpdateProfileSkillsRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    skills: list[SkillEntry]


class UpdateProfileEmploymentRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    employments: list[EmploymentEntry]


class UpdateProfileEducationRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    educations: list[EducationEntry]


class UpdateProfileProjectsRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    projects: list[ProjectEntry]


class UpdateProfileReferencesRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    references: list[ReferenceEntry]


class UpdateFullProfileRequest(BasicProfileFields):
    """Request schema for update_full_profile; every section is optional."""

    skills: Optional[list[SkillEntry]] = None
    employments: Optional[list[EmploymentEntry]] = None
    educations: Optional[list[EducationEntry]] = None
    projects: Optional[list[ProjectEntry]] = None
    references: Optional[list[ReferenceEntry]] = None

    def full_payload(self) -> dict[str, Any]:
        body = self.basic_payload()
        for section in ("skills", "employments", "educations", "projects", "references"):
            entries = getattr(self, section)
            if entries is not None:
                body[section] = [entry.to_payload() for entry in entries]
        return body


class PortfolioRequest(StrictIgnoreRequest):
    identifier: str

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        return validate_non_empty_str(value)


class Skill(BackendModel):
    name: Optional[str] = None


class Employment(BackendModel):
    company_name: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class Education(BackendModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None


class Project(BackendModel):
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


class ProfileSections(BackendModel):
    skills: Optional[list[Skill]] = None
    employments: Optional[list[Employment]] = None
    educations: Optional[list[Education]] = None
    projects: Optional[list[Project]] = None


class UserProfile(ProfileSections):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    headline: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None


class PublicPortfolio(ProfileSections):
    display_name: Optional[str] = None
    headline: Optional[str] = None
    bio: Optional[str] = None


class PortfolioVisits(BackendModel):
    total_visits: Optional[int] = None
    visits_this_month: Optional[int] = None
    visits_this_week: Optional[int] = None


class PortfolioAnalyticsRequest(StrictIgnoreRequest):
    report_slug: str

    @field_validator("report_slug")
    @classmethod
    def validate_report_slug(cls, value: str) -> str:
        return validate_non_empty_str(value)
