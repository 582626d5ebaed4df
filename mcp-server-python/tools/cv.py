"""MCP tool handlers for AI CV generation."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.ai import GenerateAndStoreCvRequest, GenerateCvRequest, StoredDocument
from schemas.common import Envelope, validate_request, validate_response


def generate_cv(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(GenerateCvRequest, args)

    with open_client(client) as api:
        payload = api.post("/api/cv/generate", json_body=request.body())

    envelope = validate_response(Envelope[Any], payload)
    error = envelope.domain_error()
    if error:
        return f"CV generation failed: {error}"
    if isinstance(envelope.data, str):
        return f"CV generated successfully.\n\n{envelope.data}"
    return "CV generated successfully. Check your documents for the result."


def generate_and_store_cv(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Generate a CV and save it to the user's documents."""
    request = validate_request(GenerateAndStoreCvRequest, args)

    with open_client(client) as api:
        payload = api.post("/api/cv/generate-and-store", json_body=request.body())

    envelope = validate_response(Envelope[StoredDocument], payload)
    error = envelope.domain_error()
    if error:
        return f"CV generation failed: {error}"

    lines = ["CV generated and saved successfully."]
    if envelope.data and envelope.data.id:
        lines.append(f"Document ID: {envelope.data.id}")
    if envelope.data and envelope.data.name:
        lines.append(f"Name: {envelope.data.name}")
    return "\n".join(lines)
