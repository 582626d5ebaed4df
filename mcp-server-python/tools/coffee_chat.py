"""
MCP tool handlers for coffee chat networking.

Covers contact discovery, chat requests and their messages, the user's own
networking profile, and request statistics.
"""

from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from schemas.coffee_chat import (
    CoffeeChatIdRequest,
    CoffeeChatMessage,
    CoffeeChatRequestItem,
    CoffeeChatStats,
    CoffeeContact,
    CoffeeProfile,
    FindCoffeeContactsRequest,
    GetCoffeeChatRequestsRequest,
    RespondCoffeeChatRequest,
    SendCoffeeChatMessageRequest,
    SendCoffeeChatRequest,
    UpdateCoffeeProfileRequest,
)
from schemas.common import Envelope, Page, validate_request, validate_response
from utils.text_format import (
    NOT_AVAILABLE,
    SHORT_TEXT_LIMIT,
    format_datetime,
    join_blocks,
    join_present,
    pluralize,
    truncate,
)


def build_find_contacts_params(request: FindCoffeeContactsRequest) -> Dict[str, Any]:
    """Query parameters for GET /api/CoffeeChat/profiles (page/pageSize pagination)."""
    params: Dict[str, Any] = {"page": "1", "pageSize": str(request.limit)}
    if request.search:
        params["searchText"] = request.search
    if request.industry:
        params["industry"] = request.industry
    if request.help_topics:
        # httpx repeats the key for list values
        params["helpTopics"] = list(request.help_topics)
    return params


def render_contact(index: int, contact: CoffeeContact) -> str:
    topics = ", ".join(contact.help_topics) if contact.help_topics else "General"
    experience = pluralize(contact.years_experience, "year") if contact.years_experience else "? years"
    return (
        f"{index}. {contact.display_name}\n"
        f"   {contact.headline or 'Professional'}\n"
        f"   Industry: {contact.industry or NOT_AVAILABLE} | Experience: {experience}\n"
        f"   Can help with: {topics}\n"
        f"   User ID: {contact.user_id}"
    )


def render_contacts(page: Optional[Page[CoffeeContact]]) -> str:
    contacts = (page.items if page else None) or []
    if not contacts:
        return "No coffee chat contacts found matching your criteria."
    entries = [render_contact(index, contact) for index, contact in enumerate(contacts, start=1)]
    total = page.total_count or len(contacts)
    return f"Found {total} contact(s):\n\n{join_blocks(entries)}"


def render_chat_requests(direction: str, requests: List[CoffeeChatRequestItem]) -> str:
    if not requests:
        return f"No {direction} coffee chat requests found."

    entries = []
    for index, item in enumerate(requests, start=1):
        person = item.receiver_display_name if direction == "sent" else item.sender_display_name
        scheduled = (
            f"\n   Scheduled: {format_datetime(item.scheduled_date_utc)}" if item.scheduled_date_utc else ""
        )
        entries.append(
            f"{index}. {person or 'Unknown'} - {item.status}\n"
            f"   Message: {truncate(item.message, SHORT_TEXT_LIMIT)}{scheduled}\n"
            f"   ID: {item.id}"
        )

    heading = "Sent" if direction == "sent" else "Received"
    return f"{heading} requests:\n\n{join_blocks(entries)}"


def render_coffee_profile(envelope: Envelope[CoffeeProfile]) -> str:
    if envelope.domain_error():
        return "No coffee chat profile found. Use update_coffee_profile to create one."

    profile = envelope.data
    if profile is None:
        return "No coffee chat profile found."

    return join_present([
        "Coffee Chat Profile",
        f"Name: {profile.display_name or NOT_AVAILABLE}",
        f"Headline: {profile.headline}" if profile.headline else None,
        f"Bio: {profile.bio}" if profile.bio else None,
        f"Industry: {profile.industry}" if profile.industry else None,
        f"Help Topics: {', '.join(profile.help_topics)}" if profile.help_topics else None,
        f"Experience: {pluralize(profile.years_experience, 'year')}" if profile.years_experience else None,
        f"Available: {'No' if profile.is_available is False else 'Yes'}",
    ])


def render_chat_messages(messages: List[CoffeeChatMessage]) -> str:
    if not messages:
        return "No messages in this conversation yet."
    lines = [
        f"[{format_datetime(message.created_on_utc)}] "
        f"{message.sender_display_name or 'Unknown'}: {message.content or ''}"
        for message in messages
    ]
    return "Chat messages:\n\n" + "\n".join(lines)


def render_chat_stats(stats: Optional[CoffeeChatStats]) -> str:
    if stats is None:
        return "Could not retrieve coffee chat statistics."

    def count(value: Optional[int]) -> int:
        return value if value is not None else 0

    return "\n".join([
        "Coffee Chat Statistics",
        f"Sent: {count(stats.total_sent)}",
        f"Received: {count(stats.total_received)}",
        f"Accepted: {count(stats.accepted)}",
        f"Declined: {count(stats.declined)}",
        f"Pending: {count(stats.pending)}",
    ])


def find_coffee_contacts(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Search people open to coffee chats by text, industry and help topics."""
    request = validate_request(FindCoffeeContactsRequest, args)

    with open_client(client) as api:
        payload = api.get("/api/CoffeeChat/profiles", params=build_find_contacts_params(request))

    return render_contacts(validate_response(Envelope[Page[CoffeeContact]], payload).data)


def send_coffee_chat_request(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(SendCoffeeChatRequest, args)

    with open_client(client) as api:
        payload = api.post(
            "/api/CoffeeChat/requests",
            json_body={"receiverId": request.receiver_id, "message": request.message},
        )

    error = validate_response(Envelope[Any], payload).domain_error()
    if error:
        return f"Failed to send request: {error}"
    return "Coffee chat request sent successfully! They'll be notified and can accept or decline."


def get_coffee_chat_requests(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(GetCoffeeChatRequestsRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/CoffeeChat/requests/{request.direction}")

    items = validate_response(Envelope[List[CoffeeChatRequestItem]], payload).data or []
    return render_chat_requests(request.direction, items)


def get_my_coffee_profile(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/coffeechat/my-profile")

    return render_coffee_profile(validate_response(Envelope[CoffeeProfile], payload))


def update_coffee_profile(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Create or update the user's networking profile with the supplied fields only."""
    request = validate_request(UpdateCoffeeProfileRequest, args)

    with open_client(client) as api:
        payload = api.post("/api/coffeechat/my-profile", json_body=request.body())

    error = validate_response(Envelope[Any], payload).domain_error()
    if error:
        return f"Failed to update coffee profile: {error}"
    return "Coffee chat profile updated successfully."


def delete_coffee_profile(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        api.delete("/api/coffeechat/my-profile")

    return "Coffee chat profile deleted successfully."


def respond_coffee_chat(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(RespondCoffeeChatRequest, args)

    with open_client(client) as api:
        api.put(f"/api/coffeechat/requests/{request.request_id}", json_body={"action": request.action})

    outcome = "accepted" if request.action == "accept" else "declined"
    return f"Coffee chat request {outcome} successfully."


def get_coffee_chat_messages(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(CoffeeChatIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/coffeechat/requests/{request.request_id}/messages")

    messages = validate_response(Envelope[List[CoffeeChatMessage]], payload).data or []
    return render_chat_messages(messages)


def send_coffee_chat_message(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(SendCoffeeChatMessageRequest, args)

    with open_client(client) as api:
        api.post(
            f"/api/coffeechat/requests/{request.request_id}/messages",
            json_body={"content": request.content},
        )

    return "Message sent successfully."


def get_coffee_chat_stats(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/coffeechat/stats")

    return render_chat_stats(validate_response(Envelope[CoffeeChatStats], payload).data)
