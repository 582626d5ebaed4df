"""
Integration tests for MCP server entry point.

Tests that server.py registers every JobJourney tool with proper metadata and
that the wrappers forward only the arguments that were provided.
"""

import asyncio
import importlib.metadata
import logging
import os
import subprocess
import sys
import threading
from pathlib import Path

import pytest

import server
from models.errors import create_api_error
from server import _provided, mcp

EXPECTED_TOOLS = {
    # jobs
    "save_job", "get_jobs", "get_job_details", "update_job_status", "delete_job", "star_job",
    "add_job_note", "update_job_note", "delete_job_note", "get_job_evaluation",
    "get_job_cover_letter", "bulk_update_jobs",
    # dashboard
    "get_dashboard_stats",
    # ai
    "evaluate_job_fit", "generate_cover_letter", "generate_interview_questions",
    "conduct_mock_interview", "get_mock_interview_report", "generate_coffee_chat_suggestions",
    # coffee chat
    "find_coffee_contacts", "send_coffee_chat_request", "get_coffee_chat_requests",
    "get_my_coffee_profile", "update_coffee_profile", "delete_coffee_profile", "respond_coffee_chat",
    "get_coffee_chat_messages", "send_coffee_chat_message", "get_coffee_chat_stats",
    # notifications
    "get_notifications", "mark_notifications_read", "get_unread_notification_count",
    "mark_notification_read", "delete_notification",
    # profile
    "get_profile", "update_profile_basic", "update_profile_skills", "update_profile_employment",
    "update_profile_education", "update_profile_projects", "update_profile_references",
    "update_full_profile", "get_public_portfolio",
    # documents
    "get_documents", "get_document", "delete_document", "rename_document",
    # subscription
    "get_subscription_status", "get_subscription_plans", "check_feature_access", "get_payment_history",
    # comments
    "get_community_comments", "get_comment_thread", "create_comment", "update_comment", "delete_comment",
    # cv, chatbot, scraping, analytics
    "generate_cv", "generate_and_store_cv", "chat", "get_scraping_stats", "get_scraping_stats_aggregated",
    "get_portfolio_visits", "get_portfolio_analytics",
}


def list_tools():
    return {tool.name: tool for tool in asyncio.run(mcp.list_tools())}


class TestServerRegistration:
    """Tests for tool registration and metadata."""

    def test_installed_mcp_provides_fastmcp(self):
        """FastMCP lives at mcp.server.fastmcp only in the 1.x line."""
        assert importlib.metadata.version("mcp").split(".")[0] == "1"

    def test_server_has_correct_name(self):
        assert mcp.name == "jobjourney-claude-plugin"

    def test_all_tools_registered(self):
        tools = list_tools()
        assert set(tools) == EXPECTED_TOOLS
        assert len(tools) == 63

    def test_every_tool_has_description(self):
        for name, tool in list_tools().items():
            assert tool.description, f"{name} has no description"

    def test_required_parameters(self):
        tools = list_tools()
        assert set(tools["save_job"].inputSchema["required"]) == {"title", "company"}
        assert set(tools["update_job_status"].inputSchema["required"]) == {"job_id", "status"}
        assert "required" not in tools["get_jobs"].inputSchema or not tools["get_jobs"].inputSchema["required"]

    def test_profile_sections_publish_entry_fields(self):
        tools = list_tools()
        schema = tools["update_profile_employment"].inputSchema
        employment = schema["$defs"]["EmploymentEntry"]
        assert {"companyName", "title", "startDate"} <= set(employment["properties"])
        assert set(employment["required"]) == {"companyName", "title"}
        assert schema["$defs"]["SkillEntry"]["required"] == ["name"]
        assert "SkillEntry" in str(tools["update_full_profile"].inputSchema["properties"]["skills"])

    def test_server_name_can_be_overridden_by_env(self):
        """Test that JOBJOURNEY_SERVER_NAME is applied in a fresh process."""
        server_dir = Path(__file__).resolve().parents[1]
        env = os.environ.copy()
        env["JOBJOURNEY_SERVER_NAME"] = "custom-server-name"
        env["PYTHONPATH"] = str(server_dir)

        proc = subprocess.run(
            [sys.executable, "-c", "import server; print(server.mcp.name)"],
            cwd=server_dir,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        assert proc.stdout.strip() == "custom-server-name"


class TestToolWrappers:
    """Tests for argument forwarding from the MCP wrappers to the handlers."""

    def test_provided_drops_none_only(self):
        assert _provided(a=None, b=0, c=False, d="") == {"b": 0, "c": False, "d": ""}

    def test_get_jobs_forwards_only_supplied_arguments(self, monkeypatch):
        calls = []
        monkeypatch.setattr(server.jobs, "get_jobs", lambda args: calls.append(args) or "ok")

        assert asyncio.run(server.get_jobs_tool(status="applied")) == "ok"
        assert calls == [{"status": "applied"}]

    def test_update_job_status_passes_raw_status(self, monkeypatch):
        calls = []
        monkeypatch.setattr(server.jobs, "update_job_status", lambda args: calls.append(args) or "ok")

        asyncio.run(server.update_job_status_tool(job_id="j1", status="withdrawn"))
        assert calls == [{"job_id": "j1", "status": "withdrawn"}]

    def test_tool_errors_are_logged_and_reraised(self, monkeypatch, caplog):
        def failing(args):
            raise create_api_error(500, "boom")

        monkeypatch.setattr(server.profile, "get_profile", failing)
        with caplog.at_level(logging.WARNING, logger="server"):
            with pytest.raises(Exception) as exc_info:
                asyncio.run(server.get_profile_tool())
        assert str(exc_info.value) == "API error 500: boom"
        assert "get_profile" in caplog.text

    def test_concurrent_calls_run_in_parallel(self, monkeypatch):
        """Two blocking handlers must be in flight at the same time."""
        barrier = threading.Barrier(2, timeout=5)

        def blocking_get_jobs(args):
            barrier.wait()
            return "ok"

        monkeypatch.setattr(server.jobs, "get_jobs", blocking_get_jobs)

        async def call_twice():
            await asyncio.gather(mcp.call_tool("get_jobs", {}), mcp.call_tool("get_jobs", {}))

        asyncio.run(call_twice())
        assert barrier.n_waiting == 0
        assert not barrier.broken

