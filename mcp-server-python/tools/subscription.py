"""MCP tool handlers for subscription status, plans and payments."""

from typing import Any, Dict, List, Optional

from backend.client import BackendClient, open_client
from schemas.account import (
    FeatureAccess,
    FeatureAccessRequest,
    Payment,
    SubscriptionPlan,
    SubscriptionStatus,
)
from schemas.common import Envelope, validate_request, validate_response
from utils.text_format import format_date, join_blocks, join_present

DEFAULT_CURRENCY = "USD"


def format_price(plan: SubscriptionPlan) -> str:
    if not plan.price:
        return "Free"
    price = int(plan.price) if float(plan.price).is_integer() else plan.price
    return f"${price}/{plan.interval or 'month'}"


def format_amount(payment: Payment) -> str:
    """Render a minor-unit amount as ``$12.34 USD``."""
    currency = (payment.currency or DEFAULT_CURRENCY).upper()
    return f"${payment.amount / 100:.2f} {currency}"


def render_subscription_status(status: Optional[SubscriptionStatus]) -> str:
    if status is None:
        return "Could not retrieve subscription status."
    return join_present([
        "Subscription Status",
        f"Plan: {status.plan or 'Free'}",
        f"Status: {status.status or 'Active'}",
        f"Renews: {format_date(status.current_period_end)}" if status.current_period_end else None,
        f"Trial ends: {format_date(status.trial_end)}" if status.trial_end else None,
        f"\nFeatures: {', '.join(status.features)}" if status.features else None,
    ])


def render_plans(plans: List[SubscriptionPlan]) -> str:
    if not plans:
        return "No subscription plans available."

    entries = []
    for index, plan in enumerate(plans, start=1):
        lines = [f"{index}. {plan.name} - {format_price(plan)}"]
        if plan.description:
            lines.append(f"   {plan.description}")
        lines.extend(f"    - {feature}" for feature in plan.features or [])
        entries.append("\n".join(lines))
    return f"Available Plans:\n\n{join_blocks(entries)}"


def render_feature_access(feature_name: str, access: Optional[FeatureAccess]) -> str:
    if access is None:
        return "Could not check feature access."
    if access.has_access:
        return f'You have access to "{feature_name}".'
    reason = f" Reason: {access.reason}" if access.reason else ""
    return f'You do not have access to "{feature_name}".{reason}'


def render_payments(payments: List[Payment]) -> str:
    if not payments:
        return "No payment history found."

    entries = []
    for index, payment in enumerate(payments, start=1):
        description = f"\n   {payment.description}" if payment.description else ""
        entries.append(
            f"{index}. {format_amount(payment)} - {payment.status}\n"
            f"   {format_date(payment.created_on_utc)}{description}"
        )
    return f"Payment History:\n\n{join_blocks(entries)}"


def get_subscription_status(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/subscription/status")

    return render_subscription_status(validate_response(Envelope[SubscriptionStatus], payload).data)


def get_subscription_plans(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/subscription/plans")

    return render_plans(validate_response(Envelope[List[SubscriptionPlan]], payload).data or [])


def check_feature_access(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(FeatureAccessRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/subscription/check/{request.feature_name}")

    access = validate_response(Envelope[FeatureAccess], payload).data
    return render_feature_access(request.feature_name, access)


def get_payment_history(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    with open_client(client) as api:
        payload = api.get("/api/subscription/payments")

    return render_payments(validate_response(Envelope[List[Payment]], payload).data or [])
