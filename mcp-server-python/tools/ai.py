"""
MCP tool handlers for the backend's AI features.

Generation endpoints are called with ``confirmFreeTrial=true``. Quota and
similar business failures come back as an envelope ``errorCode`` and are
returned as text.
"""

import logging
from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from schemas.ai import (
    CoffeeChatSuggestionsRequest,
    ConductMockInterviewRequest,
    EvaluateJobFitRequest,
    GenerateCoverLetterRequest,
    GenerateInterviewQuestionsRequest,
)
from schemas.common import Envelope, JobIdRequest, validate_request, validate_response
from schemas.jobs import JobEvaluation
from tools.jobs import render_evaluation
from utils.text_format import display_payload, numbered_list

logger = logging.getLogger(__name__)

FREE_TRIAL_PARAMS = {"confirmFreeTrial": "true"}


def render_fit_evaluation(request: EvaluateJobFitRequest, envelope: Envelope[JobEvaluation]) -> str:
    error = envelope.domain_error()
    if error:
        return f"Evaluation failed: {error}"
    if envelope.data is None:
        return "No evaluation data returned."
    company = f" at {request.company}" if request.company else ""
    return render_evaluation(
        envelope.data,
        heading=f"Job Fit Evaluation: {request.job_title}{company}",
        markers=("+", "-", "*"),
    )


def render_interview_questions(
    request: GenerateInterviewQuestionsRequest, envelope: Envelope[List[Any]]
) -> str:
    error = envelope.domain_error()
    if error:
        return f"Question generation failed: {error}"
    questions = envelope.data or []
    if not questions:
        return "No interview questions generated."
    return "\n".join([
        f"{request.interview_type} Interview Questions for {request.job_title}",
        "",
        numbered_list(str(question) for question in questions),
    ])


def render_coffee_chat_suggestions(envelope: Envelope[Any]) -> str:
    error = envelope.domain_error()
    if error:
        return f"Failed to generate suggestions: {error}"
    if not envelope.data:
        return "No suggestions generated."
    if isinstance(envelope.data, list):
        return "\n".join([
            "Coffee Chat Introduction Suggestions:",
            "",
            numbered_list(str(suggestion) for suggestion in envelope.data),
        ])
    return str(envelope.data)


def evaluate_job_fit(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Score the user's profile against a job description."""
    request = validate_request(EvaluateJobFitRequest, args)
    job = request.job_payload()
    if request.job_id:
        job["id"] = request.job_id

    with open_client(client) as api:
        payload = api.post("/api/ai/evaluate-job-fit", json_body={"job": job}, params=FREE_TRIAL_PARAMS)

    return render_fit_evaluation(request, validate_response(Envelope[JobEvaluation], payload))


def generate_cover_letter(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Generate a tailored cover letter; with ``job_id`` the backend also stores it on the job."""
    request = validate_request(GenerateCoverLetterRequest, args)
    body: Dict[str, Any] = {"job": request.job_payload()}
    if request.job_id:
        body["jobId"] = request.job_id

    with open_client(client) as api:
        payload = api.post("/api/ai/generate-cover-letter-for-job", json_body=body, params=FREE_TRIAL_PARAMS)

    envelope = validate_response(Envelope[Any], payload)
    error = envelope.domain_error()
    if error:
        return f"Cover letter generation failed: {error}"
    if not envelope.data:
        return "No cover letter generated."
    return display_payload(envelope.data)


def generate_interview_questions(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(GenerateInterviewQuestionsRequest, args)
    body = {"job": request.job_payload(), "interviewType": request.interview_type}

    with open_client(client) as api:
        payload = api.post(
            "/api/ai/generate-interview-questions", json_body=body, params=FREE_TRIAL_PARAMS
        )

    return render_interview_questions(request, validate_response(Envelope[List[Any]], payload))


def conduct_mock_interview(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(ConductMockInterviewRequest, args)
    body = {"jobId": request.job_id, "interviewType": request.interview_type}

    with open_client(client) as api:
        payload = api.post("/api/ai/conduct-mock-interview", json_body=body, params=FREE_TRIAL_PARAMS)

    envelope = validate_response(Envelope[Any], payload)
    error = envelope.domain_error()
    if error:
        return f"Mock interview failed: {error}"
    if envelope.data is None:
        return "Mock interview returned no content."
    return display_payload(envelope.data)


def get_mock_interview_report(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(JobIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/ai/get-mock-interview-report/{request.job_id}")

    envelope = validate_response(Envelope[Any], payload)
    error = envelope.domain_error()
    if error:
        return f"Failed to get report: {error}"
    if not envelope.data:
        return "No mock interview report found for this job."
    return display_payload(envelope.data)


def generate_coffee_chat_suggestions(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(CoffeeChatSuggestionsRequest, args)

    with open_client(client) as api:
        payload = api.post(
            "/api/ai/generate-coffee-chat-suggestions",
            json_body={"receiverId": request.receiver_id},
            params=FREE_TRIAL_PARAMS,
        )

    return render_coffee_chat_suggestions(validate_response(Envelope[Any], payload))
