"""
Tests for the profile and portfolio tool handlers.
"""

import pytest

from models.errors import ToolError
from schemas.profile import EmploymentEntry
from tools.profile import (
    get_profile,
    get_public_portfolio,
    update_full_profile,
    update_profile_basic,
    update_profile_education,
    update_profile_employment,
    update_profile_projects,
    update_profile_references,
    update_profile_skills,
)


class TestGetProfile:
    """Tests for get_profile."""

    def test_full_profile(self, backend, client):
        backend.respond(
            "GET",
            "/api/profile",
            {
                "data": {
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                    "email": "ada@example.com",
                    "headline": "Engineer",
                    "skills": [{"name": "Python"}, {"name": "SQL"}],
                    "employments": [
                        {"companyName": "Acme", "title": "Dev", "startDate": "2020-01-01"},
                    ],
                    "educations": [{"institution": "MIT", "degree": "BSc", "fieldOfStudy": "Math"}],
                    "projects": [{"name": "Engine", "description": "p" * 100}],
                }
            },
        )
        result = get_profile({}, client=client)

        assert result.startswith("Ada Lovelace\nEngineer\nEmail: ada@example.com\n")
        assert "\nSkills: Python, SQL" in result
        assert "  - Dev at Acme (2020-01-01 - Present)" in result
        assert "  - BSc in Math - MIT" in result
        assert "  - Engine: " + "p" * 80 + "..." in result

    def test_empty_sections(self, backend, client):
        backend.respond("GET", "/api/profile", {"data": {"firstName": "Ada"}})
        result = get_profile({}, client=client)
        assert "Skills: None listed" in result
        assert "Experience:\n  None listed" in result
        assert "Projects:\n  None listed" in result

    def test_no_profile(self, backend, client):
        assert get_profile({}, client=client) == "Could not retrieve profile."


class TestProfileUpdates:
    """Tests for the section update handlers."""

    def test_basic_update_omits_blank_fields(self, backend, client):
        result = update_profile_basic({"first_name": "Ada", "bio": ""}, client=client)
        assert (backend.last.method, backend.last.url.path) == ("PUT", "/api/profile/basic")
        assert backend.last_json() == {"firstName": "Ada"}
        assert result == "Basic profile information updated successfully."

    def test_skills(self, backend, client):
        update_profile_skills({"skills": [{"name": "Go"}]}, client=client)
        assert backend.last_json() == {"skills": [{"name": "Go"}]}

    def test_employment_keeps_camel_case(self, backend, client):
        update_profile_employment(
            {"employments": [{"companyName": "Acme", "title": "Dev", "startDate": "2021-02-01"}]},
            client=client,
        )
        assert backend.last_json() == {
            "employments": [{"companyName": "Acme", "title": "Dev", "startDate": "2021-02-01"}]
        }

    def test_employment_accepts_snake_case(self, backend, client):
        update_profile_employment({"employments": [{"company_name": "Acme", "title": "Dev"}]}, client=client)
        assert backend.last_json() == {"employments": [{"companyName": "Acme", "title": "Dev"}]}

    def test_employment_accepts_parsed_entries(self, backend, client):
        entry = EmploymentEntry(company_name="Acme", title="Dev", end_date="2023-05-01")
        update_profile_employment({"employments": [entry]}, client=client)
        assert backend.last_json() == {
            "employments": [{"companyName": "Acme", "title": "Dev", "endDate": "2023-05-01"}]
        }

    def test_employment_requires_company(self, backend, client):
        with pytest.raises(ToolError):
            update_profile_employment({"employments": [{"title": "Dev"}]}, client=client)
        assert backend.requests == []

    def test_education_projects_references(self, backend, client):
        update_profile_education(
            {"educations": [{"institution": "MIT", "degree": "BSc", "fieldOfStudy": "Math"}]}, client=client
        )
        assert backend.last_json() == {
            "educations": [{"institution": "MIT", "degree": "BSc", "fieldOfStudy": "Math"}]
        }
        update_profile_projects({"projects": [{"name": "Engine", "url": "https://x.dev"}]}, client=client)
        assert backend.last.url.path == "/api/profile/projects"
        assert update_profile_references(
            {"references": [{"name": "Bob", "relationship": "Former Manager"}]}, client=client
        ) == "References updated successfully."
        assert backend.last_json() == {"references": [{"name": "Bob", "relationship": "Former Manager"}]}

    def test_full_profile_sends_only_supplied_sections(self, backend, client):
        result = update_full_profile(
            {"headline": "Staff Engineer", "skills": [{"name": "Rust"}]}, client=client
        )
        assert backend.last.url.path == "/api/profile/full"
        assert backend.last_json() == {"headline": "Staff Engineer", "skills": [{"name": "Rust"}]}
        assert result == "Full profile updated successfully."


class TestPublicPortfolio:
    """Tests for get_public_portfolio."""

    def test_portfolio_rendering(self, backend, client):
        backend.respond(
            "GET",
            "/api/profile/portfolio/ada",
            {
                "data": {
                    "bio": "Builder",
                    "employments": [{"companyName": "Acme", "title": "Dev", "startDate": "2020-01-01"}],
                    "educations": [{"institution": "MIT", "degree": "BSc", "fieldOfStudy": "Math"}],
                    "projects": [{"name": "Engine", "url": "https://x.dev"}],
                }
            },
        )
        result = get_public_portfolio({"identifier": "ada"}, client=client)

        assert result.startswith("Portfolio: ada\n\nBuilder\n")
        assert "  - Dev at Acme\n" in result
        assert "  - BSc - MIT" in result
        assert "  - Engine (https://x.dev)" in result

    def test_portfolio_not_found(self, backend, client):
        assert get_public_portfolio({"identifier": "nobody"}, client=client) == "Portfolio not found."
