"""MCP tool handlers for stored CVs and cover letters."""

from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from schemas.account import (
    DeleteDocumentRequest,
    Document,
    DocumentIdRequest,
    DocumentSummary,
    GetDocumentsRequest,
    RenameDocumentRequest,
)
from schemas.common import Envelope, validate_request, validate_response
from utils.text_format import format_date, join_present

# (list type, endpoint, heading) in display order
DOCUMENT_LISTINGS = (
    ("cvs", "/api/document/cvs", "CVs"),
    ("cover-letters", "/api/document/cover-letters", "Cover Letters"),
)


def render_document_group(heading: str, documents: List[DocumentSummary]) -> List[str]:
    if not documents:
        return [f"{heading}: None"]
    lines = [f"{heading}:"]
    for index, document in enumerate(documents, start=1):
        lines.append(
            f"  {index}. {document.name} ({format_date(document.created_on_utc)})\n"
            f"     ID: {document.id}"
        )
    return lines


def render_document(document: Optional[Document]) -> str:
    if document is None:
        return "Document not found."
    return join_present([
        f"Document: {document.name}",
        f"Type: {document.type}" if document.type else None,
        f"Created: {format_date(document.created_on_utc)}",
        f"Updated: {format_date(document.updated_on_utc)}" if document.updated_on_utc else None,
        f"\nContent:\n{document.content}" if document.content else None,
        f"ID: {document.id}",
    ])


def get_documents(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """List CVs, cover letters, or both (CVs first)."""
    request = validate_request(GetDocumentsRequest, args)

    groups: List[str] = []
    with open_client(client) as api:
        for list_type, path, heading in DOCUMENT_LISTINGS:
            if request.type not in ("all", list_type):
                continue
            payload = api.get(path)
            documents = validate_response(Envelope[List[DocumentSummary]], payload).data or []
            groups.append("\n".join(render_document_group(heading, documents)))

    return "\n\n".join(groups)


def get_document(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(DocumentIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/document/{request.document_id}")

    return render_document(validate_response(Envelope[Document], payload).data)


def delete_document(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(DeleteDocumentRequest, args)

    with open_client(client) as api:
        api.delete(f"/api/document/{request.type}/{request.document_id}")

    return "Document deleted successfully."


def rename_document(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(RenameDocumentRequest, args)

    with open_client(client) as api:
        api.put(f"/api/document/rename/{request.document_id}", json_body={"name": request.name})

    return f'Document renamed to "{request.name}" successfully.'
