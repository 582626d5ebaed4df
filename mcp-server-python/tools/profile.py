"""
MCP tool handlers for the user's profile and public portfolio.

Section updates replace the whole section on the backend, so callers pass the
complete list of entries each time.
"""

from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from schemas.common import Envelope, validate_request, validate_response
from schemas.profile import (
    Education,
    Employment,
    PortfolioRequest,
    Project,
    PublicPortfolio,
    Skill,
    UpdateFullProfileRequest,
    UpdateProfileBasicRequest,
    UpdateProfileEducationRequest,
    UpdateProfileEmploymentRequest,
    UpdateProfileProjectsRequest,
    UpdateProfileReferencesRequest,
    UpdateProfileSkillsRequest,
    UserProfile,
)
from utils.text_format import SHORT_TEXT_LIMIT, join_present, truncate

NONE_LISTED = "None listed"


def render_skills(skills: Optional[List[Skill]]) -> str:
    names = [skill.name for skill in skills or [] if skill.name]
    return ", ".join(names) or NONE_LISTED


def render_section(lines: List[str]) -> str:
    if not lines:
        return f"  {NONE_LISTED}"
    return "\n".join(f"  - {line}" for line in lines)


def employment_line(employment: Employment, with_dates: bool = True) -> str:
    line = f"{employment.title} at {employment.company_name}"
    if with_dates and employment.start_date:
        end = employment.end_date or "Present"
        line += f" ({employment.start_date} - {end})"
    return line


def education_line(education: Education, with_field: bool = True) -> str:
    degree = education.degree or ""
    if with_field and education.field_of_study:
        degree += f" in {education.field_of_study}"
    return f"{degree} - {education.institution}"


def project_line(project: Project, with_url: bool = False) -> str:
    line = project.name or ""
    if project.description:
        line += f": {truncate(project.description, SHORT_TEXT_LIMIT)}"
    if with_url and project.url:
        line += f" ({project.url})"
    return line


def render_profile(profile: Optional[UserProfile]) -> str:
    if profile is None:
        return "Could not retrieve profile."

    full_name = f"{profile.first_name or ''} {profile.last_name or ''}".strip()
    return join_present([
        full_name,
        profile.headline,
        f"Email: {profile.email}" if profile.email else None,
        f"Location: {profile.location}" if profile.location else None,
        f"\nBio: {profile.bio}" if profile.bio else None,
        f"\nSkills: {render_skills(profile.skills)}",
        f"\nExperience:\n{render_section([employment_line(e) for e in profile.employments or []])}",
        f"\nEducation:\n{render_section([education_line(e) for e in profile.educations or []])}",
        f"\nProjects:\n{render_section([project_line(p) for p in profile.projects or []])}",
    ])


def render_portfolio(identifier: str, portfolio: Optional[PublicPortfolio]) -> str:
    if portfolio is None:
        return "Portfolio not found."

    employments = [employment_line(e, with_dates=False) for e in portfolio.employments or []]
    educations = [education_line(e, with_field=False) for e in portfolio.educations or []]
    projects = [project_line(p, with_url=True) for p in portfolio.projects or []]
    return join_present([
        f"Portfolio: {portfolio.display_name or identifier}",
        portfolio.headline,
        f"\n{portfolio.bio}" if portfolio.bio else None,
        f"\nSkills: {render_skills(portfolio.skills)}",
        f"\nExperience:\n{render_section(employments)}",
        f"\nEducation:\n{render_section(educations)}",
        f"\nProjects:\n{render_section(projects)}",
    ])


def get_profile(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/profile")

    return render_profile(validate_response(Envelope[UserProfile], payload).data)


def update_profile_basic(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Update name, headline, bio and location; blank fields are left untouched."""
    request = validate_request(UpdateProfileBasicRequest, args)

    with open_client(client) as api:
        api.put("/api/profile/basic", json_body=request.basic_payload())

    return "Basic profile information updated successfully."


def update_profile_skills(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateProfileSkillsRequest, args)

    with open_client(client) as api:
        api.put(
            "/api/profile/skills",
            json_body={"skills": [entry.to_payload() for entry in request.skills]},
        )

    return "Skills updated successfully."


def update_profile_employment(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateProfileEmploymentRequest, args)

    with open_client(client) as api:
        api.put(
            "/api/profile/employment",
            json_body={"employments": [entry.to_payload() for entry in request.employments]},
        )

    return "Employment history updated successfully."


def update_profile_education(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateProfileEducationRequest, args)

    with open_client(client) as api:
        api.put(
            "/api/profile/education",
            json_body={"educations": [entry.to_payload() for entry in request.educations]},
        )

    return "Education history updated successfully."


def update_profile_projects(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateProfileProjectsRequest, args)

    with open_client(client) as api:
        api.put(
            "/api/profile/projects",
            json_body={"projects": [entry.to_payload() for entry in request.projects]},
        )

    return "Projects updated successfully."


def update_profile_references(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateProfileReferencesRequest, args)

    with open_client(client) as api:
        api.put(
            "/api/profile/references",
            json_body={"references": [entry.to_payload() for entry in request.references]},
        )

    return "References updated successfully."


def update_full_profile(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Replace the whole profile in one call; omitted sections are not sent."""
    request = validate_request(UpdateFullProfileRequest, args)

    with open_client(client) as api:
        api.put("/api/profile/full", json_body=request.full_payload())

    return "Full profile updated successfully."


def get_public_portfolio(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(PortfolioRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/profile/portfolio/{request.identifier}")

    portfolio = validate_response(Envelope[PublicPortfolio], payload).data
    return render_portfolio(request.identifier, portfolio)
