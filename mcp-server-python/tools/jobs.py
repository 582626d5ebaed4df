"""
MCP tool handlers for job tracking.

Each handler validates its arguments, performs the backend call(s) through
``BackendClient`` and renders the result as plain text. Transport failures
propagate as ``ApiError``; envelope-level failures become text.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from models.status import VALID_STATUS_KEYS, lookup_status, status_code_for, status_label
from schemas.common import Envelope, JobIdRequest, Page, validate_request, validate_response
from schemas.jobs import (
    AddJobNoteRequest,
    BulkUpdateJobsRequest,
    CreatedResource,
    GetJobsRequest,
    JobDetail,
    JobEvaluation,
    JobNoteRequest,
    JobSummary,
    SaveJobRequest,
    StarJobRequest,
    UpdateJobNoteRequest,
    UpdateJobStatusRequest,
)
from utils.text_format import (
    DESCRIPTION_LIMIT,
    bullet_list,
    display_payload,
    format_date,
    join_blocks,
    join_present,
    truncate,
)

logger = logging.getLogger(__name__)

MANUAL_JOB_URL_PREFIX = "https://jobjourney.me/manual/"

STAR = " ⭐"

BULK_ACTION_ENDPOINTS = {
    "delete": "/api/bulk-job/delete",
    "reject": "/api/bulk-job/reject",
    "proceed": "/api/bulk-job/proceed",
}

BULK_ACTION_TEXT = {
    "delete": "deleted",
    "reject": "marked as rejected",
    "proceed": "advanced to next stage",
}


def manual_job_url(now_ms: Optional[int] = None) -> str:
    """Placeholder URL for jobs saved without a posting link."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{MANUAL_JOB_URL_PREFIX}{now_ms}"


def build_save_job_fields(request: SaveJobRequest, now_ms: Optional[int] = None) -> Dict[str, str]:
    """
    Build the multipart fields for POST /api/Job/manually-save.

    Optional fields are left out entirely when not supplied. The backend
    requires a URL, so a placeholder is generated when none is given.
    """
    fields = {"Name": request.title, "CompanyName": request.company}
    if request.location:
        fields["Location"] = request.location
    fields["JobUrl"] = request.job_url or manual_job_url(now_ms)
    if request.description:
        fields["Description"] = request.description
    if request.required_skills:
        fields["RequiredSkills"] = request.required_skills
    fields["Status"] = str(status_code_for(request.status))
    fields["IsStarred"] = "true" if request.is_starred else "false"
    return fields


def build_get_jobs_params(request: GetJobsRequest) -> Dict[str, str]:
    """Query parameters for GET /api/Job (pageNumber/pageSize pagination)."""
    params = {"pageNumber": "1", "pageSize": str(request.limit)}
    if request.search:
        params["searchText"] = request.search
    if request.status:
        params["status"] = str(status_code_for(request.status))
    if request.starred_only:
        params["isStarred"] = "true"
    return params


def render_saved_job(request: SaveJobRequest, envelope: Envelope[CreatedResource]) -> str:
    if envelope.is_success is False:
        return f"Failed to save job: {envelope.message or 'Unknown error'}"
    lines = [
        "Job saved successfully!",
        "",
        f"Title: {request.title}",
        f"Company: {request.company}",
        f"Status: {request.status or 'saved'}",
    ]
    if envelope.data and envelope.data.id:
        lines.append(f"ID: {envelope.data.id}")
    return "\n".join(lines)


def render_job_entry(index: int, job: JobSummary) -> str:
    star = STAR if job.is_starred else ""
    location = f"\n   Location: {job.location}" if job.location else ""
    return (
        f"{index}. {job.name} at {job.company_name}{star}\n"
        f"   Status: {status_label(job.status)}{location}\n"
        f"   ID: {job.id}"
    )


def render_job_list(page: Page[JobSummary]) -> str:
    jobs = page.items or []
    if not jobs:
        return "No jobs found matching your criteria."
    entries = [render_job_entry(index, job) for index, job in enumerate(jobs, start=1)]
    total = page.total_count if page.total_count is not None else len(jobs)
    return f"Found {total} job(s):\n\n{join_blocks(entries)}"


def _display_value(value: Any) -> Optional[str]:
    if value is None or value == "" or value == []:
        return None
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def render_job_details(job: Optional[JobDetail]) -> str:
    if job is None:
        return "Job not found."

    notes = "  None"
    if job.notes:
        notes = "\n".join(
            f"  {index}. {note.content or ''} ({format_date(note.created_on_utc)})"
            for index, note in enumerate(job.notes, start=1)
        )

    employment_types = _display_value(job.employment_types)
    work_arrangement = _display_value(job.work_arrangement)

    return join_present([
        f"{job.name} at {job.company_name}{STAR if job.is_starred else ''}",
        f"Status: {status_label(job.status)}",
        f"Location: {job.location}" if job.location else None,
        f"Type: {employment_types}" if employment_types else None,
        f"Arrangement: {work_arrangement}" if work_arrangement else None,
        f"URL: {job.job_url}" if job.job_url else None,
        f"\nDescription:\n{truncate(job.description, DESCRIPTION_LIMIT)}" if job.description else None,
        f"\nRequired Skills: {job.required_skills}" if job.required_skills else None,
        f"\nNotes:\n{notes}",
        f"\nSaved: {format_date(job.created_on_utc)}",
        f"Last updated: {format_date(job.status_updated_on_utc)}" if job.status_updated_on_utc else None,
        f"ID: {job.id}",
    ])


def render_evaluation(
    evaluation: Optional[JobEvaluation],
    heading: str = "Job Fit Evaluation",
    markers: tuple = ("-", "-", "-"),
) -> str:
    """Render an evaluation; ``markers`` bullet strengths, weaknesses and recommendations."""
    if evaluation is None:
        return "No evaluation found for this job."

    score = evaluation.overall_score if evaluation.overall_score is not None else "N/A"
    strengths_marker, weaknesses_marker, recommendations_marker = markers
    return join_present([
        heading,
        f"Score: {score}/100",
        f"Summary: {evaluation.summary}" if evaluation.summary else None,
        f"\nStrengths:\n{bullet_list(evaluation.strengths, strengths_marker)}" if evaluation.strengths else None,
        f"\nWeaknesses:\n{bullet_list(evaluation.weaknesses, weaknesses_marker)}" if evaluation.weaknesses else None,
        (
            f"\nRecommendations:\n{bullet_list(evaluation.recommendations, recommendations_marker)}"
            if evaluation.recommendations
            else None
        ),
    ])


def invalid_status_message(status: str) -> str:
    return f"Invalid status: {status}. Valid options: {', '.join(VALID_STATUS_KEYS)}"


def save_job(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """
    Save a job manually via multipart POST /api/Job/manually-save.

    Returns:
        Success text with title/company/status (and ID when the backend
        returns one), or a failure line when ``isSuccess`` is false.
    """
    request = validate_request(SaveJobRequest, args)
    fields = build_save_job_fields(request)

    with open_client(client) as api:
        payload = api.post_form("/api/Job/manually-save", fields)

    envelope = validate_response(Envelope[CreatedResource], payload)
    logger.info("Saved job %r at %r", request.title, request.company)
    return render_saved_job(request, envelope)


def get_jobs(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """List saved jobs with optional search, status and starred filters."""
    request = validate_request(GetJobsRequest, args)

    with open_client(client) as api:
        payload = api.get("/api/Job", params=build_get_jobs_params(request))

    return render_job_list(validate_response(Page[JobSummary], payload))


def get_job_details(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/Job/{request.job_id}")

    return render_job_details(validate_response(Envelope[JobDetail], payload).data)


def update_job_status(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """
    Move a job to a new status.

    Unknown status keys are answered with the valid options and no request
    is sent. Transition legality is left to the backend.
    """
    request = validate_request(UpdateJobStatusRequest, args)
    status = lookup_status(request.status)
    if status is None:
        return invalid_status_message(request.status)

    with open_client(client) as api:
        api.put(f"/api/Job/{request.job_id}/status/{int(status)}")

    return f"Job status updated to: {status.label}"


def delete_job(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobIdRequest, args)

    with open_client(client) as api:
        api.delete(f"/api/Job/{request.job_id}")

    return "Job deleted successfully."


def star_job(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(StarJobRequest, args)

    with open_client(client) as api:
        api.put(f"/api/Job/{request.job_id}/star", json_body={"isStarred": request.is_starred})

    return f"Job {'starred ⭐' if request.is_starred else 'unstarred'} successfully."


def add_job_note(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(AddJobNoteRequest, args)

    with open_client(client) as api:
        payload = api.post(f"/api/Job/{request.job_id}/notes", json_body={"content": request.content})

    created = validate_response(Envelope[CreatedResource], payload).data
    note_id = f"\nNote ID: {created.id}" if created and created.id else ""
    return f"Note added to job successfully.{note_id}"


def update_job_note(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateJobNoteRequest, args)

    with open_client(client) as api:
        api.put(
            f"/api/Job/{request.job_id}/notes/{request.note_id}",
            json_body={"content": request.content},
        )

    return "Note updated successfully."


def delete_job_note(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobNoteRequest, args)

    with open_client(client) as api:
        api.delete(f"/api/Job/{request.job_id}/notes/{request.note_id}")

    return "Note deleted successfully."


def get_job_evaluation(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/Job/{request.job_id}/cv-evaluation")

    return render_evaluation(validate_response(Envelope[JobEvaluation], payload).data)


def get_job_cover_letter(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/Job/{request.job_id}/cover-letter")

    letter = validate_response(Envelope[Any], payload).data
    if not letter:
        return "No cover letter found for this job."
    return display_payload(letter)


def bulk_update_jobs(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """
    Apply one bulk action to many jobs.

    Each action has its own endpoint; all IDs go out in a single request.
    """
    request = validate_request(BulkUpdateJobsRequest, args)
    endpoint = BULK_ACTION_ENDPOINTS.get(request.action)
    if endpoint is None:
        return "Invalid action. Use: delete, reject, or proceed."

    job_ids: List[str] = request.job_ids
    with open_client(client) as api:
        api.post(endpoint, json_body={"jobIds": job_ids})

    logger.info("Bulk %s applied to %d job(s)", request.action, len(job_ids))
    return f"{len(job_ids)} job(s) {BULK_ACTION_TEXT[request.action]} successfully."
