"""MCP tool handler for the job search dashboard overview."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.activity import DashboardStatistics
from schemas.common import Envelope, validate_response
from utils.text_format import join_present


def render_dashboard(stats: Optional[DashboardStatistics]) -> str:
    if stats is None:
        return "Could not retrieve dashboard statistics."

    jobs = stats.job_statistics
    scraping = stats.scraping_metrics
    documents = stats.document_statistics
    portfolio = stats.portfolio_metrics

    lines = [
        "Job Search Dashboard",
        "═══════════════════════",
        "",
        "Jobs Overview:",
    ]
    if jobs:
        lines.append(
            f"  Total: {jobs.total or 0} | Applied: {jobs.applied or 0} | Interview: {jobs.interview or 0}"
        )
        lines.append(
            f"  Offers: {jobs.offer or 0} | Rejected: {jobs.rejected or 0} | Starred: {jobs.starred or 0}"
        )
    lines.append("")
    if scraping:
        lines.append(
            f"Scraping: {scraping.total_jobs_scraped or 0} jobs scraped "
            f"from {scraping.total_websites or 0} websites"
        )
    if documents:
        lines.append(
            f"Documents: {documents.total_cvs or 0} CVs, {documents.total_cover_letters or 0} cover letters"
        )
    if portfolio:
        lines.append(f"Portfolio: {portfolio.visits_this_month or 0} visits this month")
    return join_present(lines)


def get_dashboard_stats(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Summarize job counts by status, scraping, documents and portfolio traffic."""
    with open_client(client) as api:
        payload = api.get("/api/dashboard/statistics")

    return render_dashboard(validate_response(Envelope[DashboardStatistics], payload).data)
