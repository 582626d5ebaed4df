#!/usr/bin/env python3
"""
MCP Server entry point for the JobJourney assistant tools.

This server exposes the JobJourney job-search platform (job tracking, AI
assistance, networking, profile, documents, subscription and community) to
LLM agents via the Model Context Protocol. Every tool is a thin adapter: it
validates arguments, calls the JobJourney REST backend, and returns a
human-readable text summary.

Usage:
    python server.py

The server runs in stdio mode by default. Set TRANSPORT=httpStream to serve
the streamable HTTP transport on PORT (default 8080); in that mode every
request must carry an API key (Authorization: Bearer <key> or X-API-Key).
"""

import logging
from typing import Annotated, Any, Callable, Dict, Literal, Optional

import anyio.to_thread
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import get_config
from models.errors import ToolError
from schemas.profile import EducationEntry, EmploymentEntry, ProjectEntry, ReferenceEntry, SkillEntry
from tools import (
    ai,
    analytics,
    chatbot,
    coffee_chat,
    comments,
    cv,
    dashboard,
    documents,
    jobs,
    notifications,
    profile,
    scraping,
    subscription,
)

logger = logging.getLogger(__name__)

# Create FastMCP server instance
config = get_config()
mcp = FastMCP(
    name=config.server_name,
    instructions=(
        "This server connects to the user's JobJourney account. "
        "\n\n"
        "JOB TRACKING:\n"
        "Use save_job to add a job, get_jobs to list or search saved jobs, and get_job_details for one job. "
        "Use update_job_status as an application progresses (saved, applied, initial_interview, "
        "final_interview, offered, rejected, expired). Notes, stars and bulk actions are also available."
        "\n\n"
        "AI ASSISTANCE:\n"
        "evaluate_job_fit, generate_cover_letter, generate_interview_questions, conduct_mock_interview, "
        "generate_cv and chat call the platform's AI features and may consume the user's credits."
        "\n\n"
        "NETWORKING AND ACCOUNT:\n"
        "Coffee chat tools find contacts and manage chat requests. Profile, document, subscription, "
        "notification, community comment, scraping and portfolio analytics tools manage the rest of the account."
    ),
)

ToolHandler = Callable[[Dict[str, Any]], str]


def _provided(**params: Any) -> Dict[str, Any]:
    """Keep only the parameters that were explicitly provided."""
    return {name: value for name, value in params.items() if value is not None}


async def _run(name: str, handler: ToolHandler, args: Dict[str, Any]) -> str:
    """
    Invoke a tool handler on a worker thread, logging failures before they
    surface as MCP tool errors.

    Handlers block on backend HTTP calls, so they never run on the event loop.
    """
    logger.debug("Calling tool %s with %s", name, sorted(args))
    try:
        return await anyio.to_thread.run_sync(handler, args)
    except ToolError as e:
        logger.warning("Tool %s failed: %s", name, e.to_dict()["error"])
        raise


JobId = Annotated[str, Field(description="The job ID")]
JobTitle = Annotated[str, Field(description="Job title")]
CompanyName = Annotated[Optional[str], Field(description="Company name")]
RequiredSkills = Annotated[Optional[str], Field(description="Required skills (comma-separated)")]
Limit = Annotated[Optional[int], Field(description="Number of results to return (default: 10)")]
InterviewType = Annotated[
    Optional[Literal["Technical", "Behavioral"]],
    Field(description="Interview type (default: Technical)"),
]


# ============================================================================
# Jobs
# ============================================================================


@mcp.tool(
    name="save_job",
    description=(
        "Save a new job application to track. Use this when the user wants to save or add "
        "a job they're interested in or have applied to."
    ),
)
async def save_job_tool(
    title: JobTitle,
    company: Annotated[str, Field(description="Company name")],
    location: Annotated[Optional[str], Field(description="Job location")] = None,
    job_url: Annotated[Optional[str], Field(description="URL of the job posting")] = None,
    description: Annotated[Optional[str], Field(description="Job description")] = None,
    required_skills: RequiredSkills = None,
    status: Annotated[
        Optional[Literal["saved", "applied", "initial_interview", "final_interview", "offered", "rejected"]],
        Field(description="Initial status (default: saved)"),
    ] = None,
    is_starred: Annotated[Optional[bool], Field(description="Star the job as important")] = None,
) -> str:
    """
    Save a job to the user's tracker.

    Without a job_url a unique placeholder URL is generated, since the backend
    requires one.
    """
    args = _provided(
        title=title,
        company=company,
        location=location,
        job_url=job_url,
        description=description,
        required_skills=required_skills,
        status=status,
        is_starred=is_starred,
    )
    return await _run("save_job", jobs.save_job, args)


@mcp.tool(
    name="get_jobs",
    description=(
        "Get the user's saved jobs with their current status. Use this to check job application "
        "status, list all jobs, or find specific jobs."
    ),
)
async def get_jobs_tool(
    search: Annotated[Optional[str], Field(description="Search text for job title or company")] = None,
    status: Annotated[
        Optional[
            Literal["saved", "applied", "initial_interview", "final_interview", "offered", "rejected", "expired"]
        ],
        Field(description="Filter by status"),
    ] = None,
    starred_only: Annotated[Optional[bool], Field(description="Only return starred jobs")] = None,
    limit: Limit = None,
) -> str:
    args = _provided(search=search, status=status, starred_only=starred_only, limit=limit)
    return await _run("get_jobs", jobs.get_jobs, args)


@mcp.tool(
    name="get_job_details",
    description=(
        "Get full details of a specific job by ID, including description, skills, notes, "
        "and evaluation data."
    ),
)
async def get_job_details_tool(job_id: JobId) -> str:
    return await _run("get_job_details", jobs.get_job_details, {"job_id": job_id})


@mcp.tool(
    name="update_job_status",
    description=(
        "Update the status of a job application. Use this when the user's application progresses "
        "(got an interview, received offer, was rejected, etc.)"
    ),
)
async def update_job_status_tool(
    job_id: JobId,
    status: Annotated[
        str,
        Field(
            description=(
                "New status: saved, applied, initial_interview, final_interview, offered, rejected, expired"
            )
        ),
    ],
) -> str:
    """
    Change a job's status.

    The status is passed through as free text so that an unknown value is
    answered with the list of valid statuses instead of a schema error.
    """
    return await _run("update_job_status", jobs.update_job_status, {"job_id": job_id, "status": status})


@mcp.tool(
    name="delete_job",
    description="Delete a saved job. Use this when the user wants to remove a job from their list.",
)
async def delete_job_tool(job_id: Annotated[str, Field(description="The job ID to delete")]) -> str:
    return await _run("delete_job", jobs.delete_job, {"job_id": job_id})


@mcp.tool(name="star_job", description="Star or unstar a job to mark it as important.")
async def star_job_tool(
    job_id: JobId,
    is_starred: Annotated[bool, Field(description="true to star, false to unstar")],
) -> str:
    return await _run("star_job", jobs.star_job, {"job_id": job_id, "is_starred": is_starred})


@mcp.tool(
    name="add_job_note",
    description=(
        "Add a note to a job application. Use this when the user wants to record information "
        "about a job (e.g., interviewer name, follow-up date, salary info)."
    ),
)
async def add_job_note_tool(
    job_id: JobId,
    content: Annotated[str, Field(description="The note content")],
) -> str:
    return await _run("add_job_note", jobs.add_job_note, {"job_id": job_id, "content": content})


@mcp.tool(name="update_job_note", description="Update an existing note on a job application.")
async def update_job_note_tool(
    job_id: JobId,
    note_id: Annotated[str, Field(description="The note ID")],
    content: Annotated[str, Field(description="The updated note content")],
) -> str:
    args = {"job_id": job_id, "note_id": note_id, "content": content}
    return await _run("update_job_note", jobs.update_job_note, args)


@mcp.tool(name="delete_job_note", description="Delete a note from a job application.")
async def delete_job_note_tool(
    job_id: JobId,
    note_id: Annotated[str, Field(description="The note ID to delete")],
) -> str:
    return await _run("delete_job_note", jobs.delete_job_note, {"job_id": job_id, "note_id": note_id})


@mcp.tool(name="get_job_evaluation", description="Get the saved CV/resume evaluation for a specific job.")
async def get_job_evaluation_tool(job_id: JobId) -> str:
    return await _run("get_job_evaluation", jobs.get_job_evaluation, {"job_id": job_id})


@mcp.tool(name="get_job_cover_letter", description="Get the saved cover letter for a specific job.")
async def get_job_cover_letter_tool(job_id: JobId) -> str:
    return await _run("get_job_cover_letter", jobs.get_job_cover_letter, {"job_id": job_id})


@mcp.tool(
    name="bulk_update_jobs",
    description=(
        "Perform bulk operations on multiple jobs at once: delete, reject, or advance to next stage."
    ),
)
async def bulk_update_jobs_tool(
    job_ids: Annotated[list[str], Field(description="List of job IDs")],
    action: Annotated[
        str,
        Field(description="delete, reject, or proceed (advance each job to its next stage)"),
    ],
) -> str:
    return await _run("bulk_update_jobs", jobs.bulk_update_jobs, {"job_ids": job_ids, "action": action})


# ============================================================================
# Dashboard
# ============================================================================


@mcp.tool(
    name="get_dashboard_stats",
    description=(
        "Get an overview of the user's job search progress including job counts by status, "
        "scraping metrics, document counts, and feature usage. Great for answering "
        "'how is my job search going?'"
    ),
)
async def get_dashboard_stats_tool() -> str:
    return await _run("get_dashboard_stats", dashboard.get_dashboard_stats, {})


# ============================================================================
# AI assistance
# ============================================================================


@mcp.tool(
    name="evaluate_job_fit",
    description=(
        "Use AI to evaluate how well the user's profile/resume matches a specific job. "
        "Returns a fit score and detailed analysis."
    ),
)
async def evaluate_job_fit_tool(
    job_title: JobTitle,
    description: Annotated[str, Field(description="Job description")],
    company: CompanyName = None,
    required_skills: RequiredSkills = None,
    job_id: Annotated[Optional[str], Field(description="Saved job ID to attach the evaluation to")] = None,
) -> str:
    args = _provided(
        job_title=job_title,
        description=description,
        company=company,
        required_skills=required_skills,
        job_id=job_id,
    )
    return await _run("evaluate_job_fit", ai.evaluate_job_fit, args)


@mcp.tool(
    name="generate_cover_letter",
    description=(
        "Use AI to generate a tailored cover letter for a specific job based on the user's profile/resume."
    ),
)
async def generate_cover_letter_tool(
    job_title: JobTitle,
    description: Annotated[str, Field(description="Job description")],
    company: CompanyName = None,
    required_skills: RequiredSkills = None,
    job_id: Annotated[Optional[str], Field(description="Saved job ID to attach the letter to")] = None,
) -> str:
    args = _provided(
        job_title=job_title,
        description=description,
        company=company,
        required_skills=required_skills,
        job_id=job_id,
    )
    return await _run("generate_cover_letter", ai.generate_cover_letter, args)


@mcp.tool(
    name="generate_interview_questions",
    description=(
        "Use AI to generate practice interview questions for a specific job. "
        "Choose between technical or behavioral questions."
    ),
)
async def generate_interview_questions_tool(
    job_title: JobTitle,
    company: CompanyName = None,
    description: Annotated[Optional[str], Field(description="Job description")] = None,
    required_skills: RequiredSkills = None,
    interview_type: InterviewType = None,
) -> str:
    args = _provided(
        job_title=job_title,
        company=company,
        description=description,
        required_skills=required_skills,
        interview_type=interview_type,
    )
    return await _run("generate_interview_questions", ai.generate_interview_questions, args)


@mcp.tool(
    name="conduct_mock_interview",
    description="Conduct an AI-powered mock interview for a specific job. Simulates a real interview experience.",
)
async def conduct_mock_interview_tool(job_id: JobId, interview_type: InterviewType = None) -> str:
    args = _provided(job_id=job_id, interview_type=interview_type)
    return await _run("conduct_mock_interview", ai.conduct_mock_interview, args)


@mcp.tool(name="get_mock_interview_report", description="Get the mock interview report for a specific job.")
async def get_mock_interview_report_tool(job_id: JobId) -> str:
    return await _run("get_mock_interview_report", ai.get_mock_interview_report, {"job_id": job_id})


@mcp.tool(
    name="generate_coffee_chat_suggestions",
    description=(
        "Use AI to generate personalized coffee chat introduction messages based on a person's profile."
    ),
)
async def generate_coffee_chat_suggestions_tool(
    receiver_id: Annotated[str, Field(description="User ID of the person to reach out to")],
) -> str:
    return await _run(
        "generate_coffee_chat_suggestions",
        ai.generate_coffee_chat_suggestions,
        {"receiver_id": receiver_id},
    )


# ============================================================================
# Coffee chat
# ============================================================================


@mcp.tool(
    name="find_coffee_contacts",
    description=(
        "Find people available for coffee chats / networking. Use this when the user wants to connect "
        "with professionals, find mentors, or network in a specific industry."
    ),
)
async def find_coffee_contacts_tool(
    search: Annotated[Optional[str], Field(description="Search by name, title, or bio")] = None,
    industry: Annotated[Optional[str], Field(description="Industry filter")] = None,
    help_topics: Annotated[Optional[list[str]], Field(description="Topics they can help with")] = None,
    limit: Limit = None,
) -> str:
    args = _provided(search=search, industry=industry, help_topics=help_topics, limit=limit)
    return await _run("find_coffee_contacts", coffee_chat.find_coffee_contacts, args)


@mcp.tool(
    name="send_coffee_chat_request",
    description=(
        "Send a coffee chat request to a user. Use this after finding contacts with find_coffee_contacts."
    ),
)
async def send_coffee_chat_request_tool(
    receiver_id: Annotated[str, Field(description="User ID of the person to contact")],
    message: Annotated[
        str,
        Field(description="A personalized message (20-500 characters) explaining why you'd like to chat"),
    ],
) -> str:
    args = {"receiver_id": receiver_id, "message": message}
    return await _run("send_coffee_chat_request", coffee_chat.send_coffee_chat_request, args)


@mcp.tool(
    name="get_coffee_chat_requests",
    description="Get the user's coffee chat requests - either sent or received.",
)
async def get_coffee_chat_requests_tool(
    direction: Annotated[
        Optional[Literal["sent", "received"]],
        Field(description="Which requests to list (default: sent)"),
    ] = None,
) -> str:
    args = _provided(direction=direction)
    return await _run("get_coffee_chat_requests", coffee_chat.get_coffee_chat_requests, args)


@mcp.tool(name="get_my_coffee_profile", description="Get the user's own coffee chat profile.")
async def get_my_coffee_profile_tool() -> str:
    return await _run("get_my_coffee_profile", coffee_chat.get_my_coffee_profile, {})


@mcp.tool(
    name="update_coffee_profile",
    description="Create or update the user's coffee chat profile to make themselves available for networking.",
)
async def update_coffee_profile_tool(
    headline: Annotated[Optional[str], Field(description="Professional headline")] = None,
    bio: Annotated[Optional[str], Field(description="Short bio")] = None,
    industry: Annotated[Optional[str], Field(description="Industry")] = None,
    help_topics: Annotated[Optional[list[str]], Field(description="Topics the user can help with")] = None,
    years_experience: Annotated[Optional[int], Field(description="Years of experience")] = None,
    is_available: Annotated[Optional[bool], Field(description="Open to coffee chats")] = None,
) -> str:
    args = _provided(
        headline=headline,
        bio=bio,
        industry=industry,
        help_topics=help_topics,
        years_experience=years_experience,
        is_available=is_available,
    )
    return await _run("update_coffee_profile", coffee_chat.update_coffee_profile, args)


@mcp.tool(
    name="delete_coffee_profile",
    description="Delete the user's coffee chat profile, removing them from the networking pool.",
)
async def delete_coffee_profile_tool() -> str:
    return await _run("delete_coffee_profile", coffee_chat.delete_coffee_profile, {})


@mcp.tool(name="respond_coffee_chat", description="Accept or decline a received coffee chat request.")
async def respond_coffee_chat_tool(
    request_id: Annotated[str, Field(description="The coffee chat request ID")],
    action: Annotated[Literal["accept", "decline"], Field(description="accept or decline")],
) -> str:
    args = {"request_id": request_id, "action": action}
    return await _run("respond_coffee_chat", coffee_chat.respond_coffee_chat, args)


@mcp.tool(name="get_coffee_chat_messages", description="Get messages in a coffee chat conversation.")
async def get_coffee_chat_messages_tool(
    request_id: Annotated[str, Field(description="The coffee chat request ID")],
) -> str:
    return await _run("get_coffee_chat_messages", coffee_chat.get_coffee_chat_messages, {"request_id": request_id})


@mcp.tool(name="send_coffee_chat_message", description="Send a message in a coffee chat conversation.")
async def send_coffee_chat_message_tool(
    request_id: Annotated[str, Field(description="The coffee chat request ID")],
    content: Annotated[str, Field(description="Message content")],
) -> str:
    args = {"request_id": request_id, "content": content}
    return await _run("send_coffee_chat_message", coffee_chat.send_coffee_chat_message, args)


@mcp.tool(
    name="get_coffee_chat_stats",
    description="Get coffee chat statistics (requests sent, received, accepted, etc.).",
)
async def get_coffee_chat_stats_tool() -> str:
    return await _run("get_coffee_chat_stats", coffee_chat.get_coffee_chat_stats, {})


# ============================================================================
# Notifications
# ============================================================================


@mcp.tool(
    name="get_notifications",
    description=(
        "Get the user's notifications. Use this when the user asks about updates, alerts, or what's new."
    ),
)
async def get_notifications_tool(limit: Limit = None) -> str:
    return await _run("get_notifications", notifications.get_notifications, _provided(limit=limit))


@mcp.tool(name="mark_notifications_read", description="Mark all notifications as read.")
async def mark_notifications_read_tool() -> str:
    return await _run("mark_notifications_read", notifications.mark_notifications_read, {})


@mcp.tool(name="get_unread_notification_count", description="Get the count of unread notifications.")
async def get_unread_notification_count_tool() -> str:
    return await _run("get_unread_notification_count", notifications.get_unread_notification_count, {})


@mcp.tool(name="mark_notification_read", description="Mark a single notification as read.")
async def mark_notification_read_tool(
    notification_id: Annotated[str, Field(description="The notification ID")],
) -> str:
    args = {"notification_id": notification_id}
    return await _run("mark_notification_read", notifications.mark_notification_read, args)


@mcp.tool(name="delete_notification", description="Delete a notification.")
async def delete_notification_tool(
    notification_id: Annotated[str, Field(description="The notification ID to delete")],
) -> str:
    args = {"notification_id": notification_id}
    return await _run("delete_notification", notifications.delete_notification, args)


# ============================================================================
# Profile
# ============================================================================

SkillList = Annotated[list[SkillEntry], Field(description="List of skills, each {name}")]
EmploymentList = Annotated[
    list[EmploymentEntry],
    Field(description="Employment entries: companyName, title, startDate?, endDate?, description?"),
]
EducationList = Annotated[
    list[EducationEntry],
    Field(description="Education entries: institution, degree, fieldOfStudy?, startDate?, endDate?"),
]
ProjectList = Annotated[list[ProjectEntry], Field(description="Projects: name, description?, url?, technologies?")]
ReferenceList = Annotated[
    list[ReferenceEntry],
    Field(description="References: name, relationship?, company?, email?, phone?"),
]


@mcp.tool(
    name="get_profile",
    description=(
        "Get the user's profile information including skills, experience, education, and projects."
    ),
)
async def get_profile_tool() -> str:
    return await _run("get_profile", profile.get_profile, {})


@mcp.tool(
    name="update_profile_basic",
    description="Update basic profile information (name, headline, bio, location).",
)
async def update_profile_basic_tool(
    first_name: Annotated[Optional[str], Field(description="First name")] = None,
    last_name: Annotated[Optional[str], Field(description="Last name")] = None,
    headline: Annotated[Optional[str], Field(description="Professional headline")] = None,
    bio: Annotated[Optional[str], Field(description="Bio/about section")] = None,
    location: Annotated[Optional[str], Field(description="Location")] = None,
) -> str:
    args = _provided(first_name=first_name, last_name=last_name, headline=headline, bio=bio, location=location)
    return await _run("update_profile_basic", profile.update_profile_basic, args)


@mcp.tool(name="update_profile_skills", description="Update the user's skills list.")
async def update_profile_skills_tool(
    skills: SkillList,
) -> str:
    return await _run("update_profile_skills", profile.update_profile_skills, {"skills": skills})


@mcp.tool(name="update_profile_employment", description="Update the user's employment history.")
async def update_profile_employment_tool(
    employments: EmploymentList,
) -> str:
    return await _run("update_profile_employment", profile.update_profile_employment, {"employments": employments})


@mcp.tool(name="update_profile_education", description="Update the user's education history.")
async def update_profile_education_tool(
    educations: EducationList,
) -> str:
    return await _run("update_profile_education", profile.update_profile_education, {"educations": educations})


@mcp.tool(name="update_profile_projects", description="Update the user's projects.")
async def update_profile_projects_tool(
    projects: ProjectList,
) -> str:
    return await _run("update_profile_projects", profile.update_profile_projects, {"projects": projects})


@mcp.tool(name="update_profile_references", description="Update the user's references.")
async def update_profile_references_tool(
    references: ReferenceList,
) -> str:
    return await _run("update_profile_references", profile.update_profile_references, {"references": references})


@mcp.tool(name="update_full_profile", description="Update the entire user profile at once (all sections).")
async def update_full_profile_tool(
    first_name: Annotated[Optional[str], Field(description="First name")] = None,
    last_name: Annotated[Optional[str], Field(description="Last name")] = None,
    headline: Annotated[Optional[str], Field(description="Professional headline")] = None,
    bio: Annotated[Optional[str], Field(description="Bio/about section")] = None,
    location: Annotated[Optional[str], Field(description="Location")] = None,
    skills: Annotated[Optional[list[SkillEntry]], Field(description="Skills, each {name}")] = None,
    employments: Annotated[Optional[list[EmploymentEntry]], Field(description="Employment entries")] = None,
    educations: Annotated[Optional[list[EducationEntry]], Field(description="Education entries")] = None,
    projects: Annotated[Optional[list[ProjectEntry]], Field(description="Projects")] = None,
    references: Annotated[Optional[list[ReferenceEntry]], Field(description="References")] = None,
) -> str:
    args = _provided(
        first_name=first_name,
        last_name=last_name,
        headline=headline,
        bio=bio,
        location=location,
        skills=skills,
        employments=employments,
        educations=educations,
        projects=projects,
        references=references,
    )
    return await _run("update_full_profile", profile.update_full_profile, args)


@mcp.tool(
    name="get_public_portfolio",
    description="View someone's public portfolio by their identifier (username or slug).",
)
async def get_public_portfolio_tool(
    identifier: Annotated[str, Field(description="Portfolio identifier (username or slug)")],
) -> str:
    return await _run("get_public_portfolio", profile.get_public_portfolio, {"identifier": identifier})


# ============================================================================
# Documents
# ============================================================================


@mcp.tool(name="get_documents", description="List all user documents (CVs and cover letters).")
async def get_documents_tool(
    type: Annotated[
        Optional[Literal["all", "cvs", "cover-letters"]],
        Field(description="Type of documents to list (default: all)"),
    ] = None,
) -> str:
    return await _run("get_documents", documents.get_documents, _provided(type=type))


@mcp.tool(name="get_document", description="Get details of a specific document by ID.")
async def get_document_tool(document_id: Annotated[str, Field(description="The document ID")]) -> str:
    return await _run("get_document", documents.get_document, {"document_id": document_id})


@mcp.tool(name="delete_document", description="Delete a document (CV or cover letter).")
async def delete_document_tool(
    document_id: Annotated[str, Field(description="The document ID to delete")],
    type: Annotated[Literal["cv", "cover-letter"], Field(description="Type of document to delete")],
) -> str:
    return await _run("delete_document", documents.delete_document, {"document_id": document_id, "type": type})


@mcp.tool(name="rename_document", description="Rename a document.")
async def rename_document_tool(
    document_id: Annotated[str, Field(description="The document ID to rename")],
    name: Annotated[str, Field(description="The new name for the document")],
) -> str:
    return await _run("rename_document", documents.rename_document, {"document_id": document_id, "name": name})


# ============================================================================
# Subscription
# ============================================================================


@mcp.tool(
    name="get_subscription_status",
    description="Check the user's current subscription status and plan details.",
)
async def get_subscription_status_tool() -> str:
    return await _run("get_subscription_status", subscription.get_subscription_status, {})


@mcp.tool(name="get_subscription_plans", description="View available subscription plans and pricing.")
async def get_subscription_plans_tool() -> str:
    return await _run("get_subscription_plans", subscription.get_subscription_plans, {})


@mcp.tool(
    name="check_feature_access",
    description="Check if the user has access to a specific feature based on their subscription.",
)
async def check_feature_access_tool(
    feature_name: Annotated[str, Field(description="The feature name to check access for")],
) -> str:
    return await _run("check_feature_access", subscription.check_feature_access, {"feature_name": feature_name})


@mcp.tool(name="get_payment_history", description="View the user's payment history.")
async def get_payment_history_tool() -> str:
    return await _run("get_payment_history", subscription.get_payment_history, {})


# ============================================================================
# Community comments
# ============================================================================


@mcp.tool(name="get_community_comments", description="Browse community posts and comments.")
async def get_community_comments_tool(
    page: Annotated[Optional[int], Field(description="Page number (default: 1)")] = None,
    limit: Limit = None,
) -> str:
    args = _provided(page=page, limit=limit)
    return await _run("get_community_comments", comments.get_community_comments, args)


@mcp.tool(name="get_comment_thread", description="View a comment and its replies.")
async def get_comment_thread_tool(comment_id: Annotated[str, Field(description="The comment ID")]) -> str:
    return await _run("get_comment_thread", comments.get_comment_thread, {"comment_id": comment_id})


@mcp.tool(name="create_comment", description="Post a new comment in the community.")
async def create_comment_tool(
    content: Annotated[str, Field(description="Comment content")],
    parent_id: Annotated[Optional[str], Field(description="Parent comment ID when replying")] = None,
) -> str:
    return await _run("create_comment", comments.create_comment, _provided(content=content, parent_id=parent_id))


@mcp.tool(name="update_comment", description="Edit an existing comment.")
async def update_comment_tool(
    comment_id: Annotated[str, Field(description="The comment ID")],
    content: Annotated[str, Field(description="Updated content")],
) -> str:
    return await _run("update_comment", comments.update_comment, {"comment_id": comment_id, "content": content})


@mcp.tool(name="delete_comment", description="Delete a comment.")
async def delete_comment_tool(comment_id: Annotated[str, Field(description="The comment ID to delete")]) -> str:
    return await _run("delete_comment", comments.delete_comment, {"comment_id": comment_id})


# ============================================================================
# CV and chatbot
# ============================================================================


@mcp.tool(name="generate_cv", description="Generate a CV/resume as PDF using AI based on the user's profile.")
async def generate_cv_tool(
    template: Annotated[Optional[str], Field(description="CV template name")] = None,
    job_title: Annotated[Optional[str], Field(description="Target job title to tailor the CV")] = None,
    job_description: Annotated[Optional[str], Field(description="Target job description")] = None,
) -> str:
    args = _provided(template=template, job_title=job_title, job_description=job_description)
    return await _run("generate_cv", cv.generate_cv, args)


@mcp.tool(name="generate_and_store_cv", description="Generate a CV and save it to the user's documents.")
async def generate_and_store_cv_tool(
    name: Annotated[Optional[str], Field(description="Document name for the stored CV")] = None,
    template: Annotated[Optional[str], Field(description="CV template name")] = None,
    job_title: Annotated[Optional[str], Field(description="Target job title to tailor the CV")] = None,
    job_description: Annotated[Optional[str], Field(description="Target job description")] = None,
) -> str:
    args = _provided(name=name, template=template, job_title=job_title, job_description=job_description)
    return await _run("generate_and_store_cv", cv.generate_and_store_cv, args)


@mcp.tool(
    name="chat",
    description=(
        "Send a message to the JobJourney AI chatbot for career advice, job search tips, or general help."
    ),
)
async def chat_tool(
    message: Annotated[str, Field(description="Message to send")],
    conversation_id: Annotated[
        Optional[str], Field(description="Conversation ID to continue an existing conversation")
    ] = None,
) -> str:
    return await _run("chat", chatbot.chat, _provided(message=message, conversation_id=conversation_id))


# ============================================================================
# Scraping and analytics
# ============================================================================


@mcp.tool(name="get_scraping_stats", description="View job scraping statistics from the browser extension.")
async def get_scraping_stats_tool() -> str:
    return await _run("get_scraping_stats", scraping.get_scraping_stats, {})


@mcp.tool(
    name="get_scraping_stats_aggregated",
    description="View aggregated scraping statistics with breakdowns by website and time period.",
)
async def get_scraping_stats_aggregated_tool() -> str:
    return await _run("get_scraping_stats_aggregated", scraping.get_scraping_stats_aggregated, {})


@mcp.tool(name="get_portfolio_visits", description="Get the user's portfolio visit count.")
async def get_portfolio_visits_tool() -> str:
    return await _run("get_portfolio_visits", analytics.get_portfolio_visits, {})


@mcp.tool(name="get_portfolio_analytics", description="Get detailed analytics for a portfolio page.")
async def get_portfolio_analytics_tool(
    report_slug: Annotated[str, Field(description="The portfolio slug to get analytics for")],
) -> str:
    return await _run("get_portfolio_analytics", analytics.get_portfolio_analytics, {"report_slug": report_slug})


def build_http_app():
    """Streamable HTTP ASGI app with the API key gate in front of it."""
    from utils.http_auth import ApiKeyAuthMiddleware

    return ApiKeyAuthMiddleware(mcp.streamable_http_app())


def main():
    """
    Main entry point for the MCP server.

    Runs over stdio unless TRANSPORT selects the streamable HTTP transport.
    """
    # Load and setup configuration
    config.setup_logging()

    logger.info("Starting JobJourney MCP Server")
    logger.info(f"Server name: {config.server_name}")
    logger.info(f"Transport: {config.transport}")

    # Validate configuration and log warnings
    warnings = config.validate()
    for warning in warnings:
        logger.warning(warning)

    if config.is_http_transport:
        import uvicorn

        logger.info(f"Server starting in httpStream mode on {config.host}:{config.port}")
        uvicorn.run(build_http_app(), host=config.host, port=config.port, log_level=config.log_level.lower())
        return

    logger.info("Server starting in stdio mode")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
