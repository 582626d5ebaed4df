"""MCP tool handler for the JobJourney career chatbot."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.ai import ChatReply, ChatRequest
from schemas.common import Envelope, validate_request, validate_response
from utils.text_format import display_payload


def render_chat_reply(envelope: Envelope[Any]) -> str:
    """
    Render the chatbot answer.

    The backend returns either ``{response, conversationId}`` or the answer
    directly as ``data``.
    """
    error = envelope.domain_error()
    if error:
        return f"Chatbot error: {error}"

    response: Any = envelope.data
    conversation_id = None
    if isinstance(envelope.data, dict):
        reply = validate_response(ChatReply, envelope.data)
        if reply.response:
            response = reply.response
        conversation_id = reply.conversation_id

    if response is None:
        return "The chatbot returned no response."

    text = display_payload(response)
    if conversation_id:
        text += f"\n\n[Conversation ID: {conversation_id}]"
    return text


def chat(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(ChatRequest, args)
    body = {"message": request.message}
    if request.conversation_id:
        body["conversationId"] = request.conversation_id

    with open_client(client) as api:
        payload = api.post("/api/chatbot/chat", json_body=body)

    return render_chat_reply(validate_response(Envelope[Any], payload))
