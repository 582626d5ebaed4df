"""MCP tool handlers for portfolio traffic analytics."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.common import Envelope, validate_request, validate_response
from schemas.profile import PortfolioAnalyticsRequest, PortfolioVisits
from utils.text_format import display_payload


def render_portfolio_visits(visits: Optional[PortfolioVisits]) -> str:
    if visits is None:
        return "Could not retrieve portfolio visit data."
    return "\n".join([
        "Portfolio Visits",
        f"Total: {visits.total_visits or 0}",
        f"This month: {visits.visits_this_month or 0}",
        f"This week: {visits.visits_this_week or 0}",
    ])


def get_portfolio_visits(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/profile/portfolio/visits")

    return render_portfolio_visits(validate_response(Envelope[PortfolioVisits], payload).data)


def get_portfolio_analytics(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(PortfolioAnalyticsRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/report-tracking/analytics/{request.report_slug}")

    data = validate_response(Envelope[Any], payload).data
    if not data:
        return "Could not retrieve portfolio analytics."
    return display_payload(data)
