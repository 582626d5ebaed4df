"""
Tests for the dashboard, notification and community comment tool handlers.
"""

import pytest

from models.errors import ToolError
from tools.comments import (
    create_comment,
    delete_comment,
    get_comment_thread,
    get_community_comments,
    update_comment,
)
from tools.dashboard import get_dashboard_stats
from tools.notifications import (
    delete_notification,
    get_notifications,
    get_unread_notification_count,
    mark_notification_read,
    mark_notifications_read,
)


class TestDashboard:
    """Tests for get_dashboard_stats."""

    def test_full_dashboard(self, backend, client):
        backend.respond(
            "GET",
            "/api/dashboard/statistics",
            {
                "data": {
                    "jobStatistics": {
                        "total": 20, "applied": 8, "interview": 3, "offer": 1, "rejected": 4, "starred": 2
                    },
                    "scrapingMetrics": {"totalJobsScraped": 150, "totalWebsites": 4},
                    "documentStatistics": {"totalCvs": 2, "totalCoverLetters": 5},
                    "portfolioMetrics": {"visitsThisMonth": 37},
                }
            },
        )
        result = get_dashboard_stats({}, client=client)

        assert result.startswith("Job Search Dashboard\n")
        assert "  Total: 20 | Applied: 8 | Interview: 3" in result
        assert "  Offers: 1 | Rejected: 4 | Starred: 2" in result
        assert "Scraping: 150 jobs scraped from 4 websites" in result
        assert "Documents: 2 CVs, 5 cover letters" in result
        assert "Portfolio: 37 visits this month" in result

    def test_missing_sections_are_skipped(self, backend, client):
        backend.respond("GET", "/api/dashboard/statistics", {"data": {}})
        result = get_dashboard_stats({}, client=client)
        assert "Jobs Overview:" in result
        assert "Scraping" not in result
        assert "Portfolio" not in result

    def test_missing_counters_render_as_zero(self, backend, client):
        backend.respond(
            "GET",
            "/api/dashboard/statistics",
            {
                "data": {
                    "jobStatistics": {"total": 5, "applied": None},
                    "scrapingMetrics": {"totalJobsScraped": 12},
                    "documentStatistics": {},
                    "portfolioMetrics": {"visitsThisMonth": None},
                }
            },
        )
        result = get_dashboard_stats({}, client=client)

        assert "None" not in result
        assert "  Total: 5 | Applied: 0 | Interview: 0" in result
        assert "  Offers: 0 | Rejected: 0 | Starred: 0" in result
        assert "Scraping: 12 jobs scraped from 0 websites" in result
        assert "Documents: 0 CVs, 0 cover letters" in result
        assert "Portfolio: 0 visits this month" in result

    def test_no_data(self, backend, client):
        assert get_dashboard_stats({}, client=client) == "Could not retrieve dashboard statistics."


class TestNotifications:
    """Tests for the notification handlers."""

    def test_listing_marks_unread(self, backend, client):
        backend.respond(
            "GET",
            "/api/notification",
            {
                "data": {
                    "items": [
                        {"title": "New match", "message": "3 jobs", "isRead": False,
                         "createdOnUtc": "2024-02-01T09:15:00Z"},
                        {"title": "Reminder", "message": "Follow up", "isRead": True,
                         "createdOnUtc": "2024-02-02T18:00:00Z"},
                    ],
                    "unreadCount": 1,
                }
            },
        )
        result = get_notifications({"limit": 2}, client=client)

        assert dict(backend.last.url.params) == {"page": "1", "pageSize": "2"}
        assert result.startswith("Notifications (1 unread):\n\n")
        assert "[!] 1. New match\n   3 jobs\n   2/1/2024, 9:15:00 AM" in result
        assert "   2. Reminder" in result

    def test_empty(self, backend, client):
        assert get_notifications({}, client=client) == "No notifications."

    def test_unread_count(self, backend, client):
        backend.respond("GET", "/api/notification/count", {"data": 4})
        assert get_unread_notification_count({}, client=client) == "Unread notifications: 4"

    def test_unread_count_missing(self, backend, client):
        assert get_unread_notification_count({}, client=client) == "Unread notifications: 0"

    def test_mark_and_delete(self, backend, client):
        assert mark_notifications_read({}, client=client) == "All notifications marked as read."
        assert backend.last.url.path == "/api/notification/read-all"
        assert mark_notification_read({"notification_id": "n1"}, client=client) == "Notification marked as read."
        assert backend.last.url.path == "/api/notification/n1/read"
        assert delete_notification({"notification_id": "n1"}, client=client) == "Notification deleted."
        assert (backend.last.method, backend.last.url.path) == ("DELETE", "/api/notification/n1")


class TestComments:
    """Tests for the community comment handlers."""

    def test_listing(self, backend, client):
        backend.respond(
            "GET",
            "/api/comment/community",
            {
                "data": {
                    "items": [
                        {"id": "c1", "authorDisplayName": "Jo", "content": "x" * 200, "replyCount": 1,
                         "createdOnUtc": "2024-03-03T12:00:00Z"}
                    ],
                    "totalCount": 9,
                }
            },
        )
        result = get_community_comments({"page": 2}, client=client)

        assert dict(backend.last.url.params) == {"page": "2", "pageSize": "10"}
        assert result.startswith("Community Comments (9 total):\n\n1. Jo (1 reply)\n")
        assert "x" * 150 + "..." in result
        assert "3/3/2024, 12:00:00 PM" in result

    def test_defaults(self, backend, client):
        assert get_community_comments({}, client=client) == "No community comments found."
        assert backend.last.url.params["page"] == "1"

    def test_invalid_page(self, client):
        with pytest.raises(ToolError):
            get_community_comments({"page": -3}, client=client)

    def test_thread(self, backend, client):
        backend.respond(
            "GET",
            "/api/comment/c1/thread",
            {
                "data": {
                    "authorDisplayName": None,
                    "content": "Question?",
                    "createdOnUtc": "2024-03-03T12:00:00Z",
                    "replies": [{"authorDisplayName": "Al", "content": "Answer", "createdOnUtc": "2024-03-04T08:00:00Z"}],
                }
            },
        )
        result = get_comment_thread({"comment_id": "c1"}, client=client)
        assert result == (
            "Anonymous: Question?\n"
            "Posted: 3/3/2024, 12:00:00 PM\n"
            "\nReplies:\n"
            "  1. Al: Answer\n"
            "     3/4/2024, 8:00:00 AM"
        )

    def test_thread_without_replies(self, backend, client):
        backend.respond("GET", "/api/comment/c1/thread", {"data": {"authorDisplayName": "Jo", "content": "Hi"}})
        assert get_comment_thread({"comment_id": "c1"}, client=client).endswith("Replies:\n  No replies")

    def test_create_reply(self, backend, client):
        backend.respond("POST", "/api/comment", {"data": {"id": "c2"}})
        result = create_comment({"content": "Thanks", "parent_id": "c1"}, client=client)
        assert backend.last_json() == {"content": "Thanks", "parentId": "c1"}
        assert result == "Comment posted successfully.\nComment ID: c2"

    def test_create_top_level_omits_parent(self, backend, client):
        create_comment({"content": "Hello all"}, client=client)
        assert backend.last_json() == {"content": "Hello all"}

    def test_update_and_delete(self, backend, client):
        assert update_comment({"comment_id": "c1", "content": "Edited"}, client=client) == "Comment updated successfully."
        assert backend.last.method == "PUT"
        assert delete_comment({"comment_id": "c1"}, client=client) == "Comment deleted successfully."
        assert backend.last.url.path == "/api/comment/c1"
