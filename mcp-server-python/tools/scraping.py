"""MCP tool handlers for browser-extension scraping statistics."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.account import ScrapingStatistics
from schemas.common import Envelope, validate_response
from utils.text_format import display_payload


def render_scraping_stats(stats: Optional[ScrapingStatistics]) -> str:
    if stats is None:
        return "Could not retrieve scraping statistics."

    websites = "  None"
    if stats.websites:
        websites = "\n".join(
            f"  {index}. {site.name}: {site.job_count} jobs"
            for index, site in enumerate(stats.websites, start=1)
        )
    return "\n".join([
        "Scraping Statistics",
        f"Total jobs scraped: {stats.total_jobs_scraped or 0}",
        f"Total sessions: {stats.total_sessions or 0}",
        f"\nBy Website:\n{websites}",
    ])


def get_scraping_stats(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/scraping-statistics")

    return render_scraping_stats(validate_response(Envelope[ScrapingStatistics], payload).data)


def get_scraping_stats_aggregated(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Aggregated breakdowns are free-form and rendered verbatim."""
    with open_client(client) as api:
        payload = api.get("/api/scraping-statistics/aggregated")

    data = validate_response(Envelope[Any], payload).data
    if not data:
        return "Could not retrieve aggregated scraping statistics."
    return display_payload(data)
