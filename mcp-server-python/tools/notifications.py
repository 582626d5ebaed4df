"""MCP tool handlers for user notifications."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.activity import GetNotificationsRequest, NotificationIdRequest, NotificationPage
from schemas.common import Envelope, validate_request, validate_response
from utils.text_format import format_datetime, join_blocks


def render_notifications(page: Optional[NotificationPage]) -> str:
    notifications = (page.items if page else None) or []
    if not notifications:
        return "No notifications."

    entries = []
    for index, notification in enumerate(notifications, start=1):
        marker = "  " if notification.is_read else "[!]"
        entries.append(
            f"{marker} {index}. {notification.title}\n"
            f"   {notification.message}\n"
            f"   {format_datetime(notification.created_on_utc)}"
        )

    unread = f" ({page.unread_count} unread)" if page.unread_count else ""
    return f"Notifications{unread}:\n\n{join_blocks(entries)}"


def get_notifications(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """List recent notifications (page/pageSize pagination, first page only)."""
    request = validate_request(GetNotificationsRequest, args)

    with open_client(client) as api:
        payload = api.get("/api/notification", params={"page": "1", "pageSize": str(request.limit)})

    return render_notifications(validate_response(Envelope[NotificationPage], payload).data)


def mark_notifications_read(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        api.put("/api/notification/read-all")

    return "All notifications marked as read."


def get_unread_notification_count(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/notification/count")

    count = validate_response(Envelope[int], payload).data
    return f"Unread notifications: {count if count is not None else 0}"


def mark_notification_read(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(NotificationIdRequest, args)

    with open_client(client) as api:
        api.put(f"/api/notification/{request.notification_id}/read")

    return "Notification marked as read."


def delete_notification(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(NotificationIdRequest, args)

    with open_client(client) as api:
        api.delete(f"/api/notification/{request.notification_id}")

    return "Notification deleted."
