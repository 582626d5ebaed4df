"""
Plain-text formatting helpers shared by the tool renderers.

Renderers build a list of optional lines and hand it to ``join_present``;
anything None or empty is dropped, so absent sections never print a header.
"""

import json
from datetime import datetime
from typing import Any, Iterable, Optional

ELLIPSIS = "..."

DESCRIPTION_LIMIT = 500
COMMENT_LIMIT = 150
SHORT_TEXT_LIMIT = 80

NOT_AVAILABLE = "N/A"


def truncate(text: Optional[str], limit: int) -> str:
    """
    Cut ``text`` to ``limit`` characters, appending an ellipsis only when cut.

    Output never exceeds ``limit + len(ELLIPSIS)`` characters.
    """
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (trailing ``Z`` and 7-digit fractions allowed)."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Render a timestamp as ``M/D/YYYY``; unparseable input is returned as-is."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else NOT_AVAILABLE
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_datetime(value: Any) -> str:
    """Render a timestamp as ``M/D/YYYY, h:mm:ss AM``."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else NOT_AVAILABLE
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return (
        f"{parsed.month}/{parsed.day}/{parsed.year}, "
        f"{hour}:{parsed.minute:02d}:{parsed.second:02d} {meridiem}"
    )


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """Return ``"<count> <noun>"`` with the noun matching the count."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def join_present(lines: Iterable[Optional[str]]) -> str:
    """Join non-empty lines with newlines."""
    return "\n".join(line for line in lines if line)


def join_blocks(blocks: Iterable[str]) -> str:
    """Join primary list entries with a blank line between them."""
    return "\n\n".join(blocks)


def bullet_list(items: Iterable[str], marker: str = "-", indent: str = "  ") -> str:
    """Render items one per line as ``<indent><marker> item``."""
    return "\n".join(f"{indent}{marker} {item}" for item in items)


def numbered_list(items: Iterable[str], indent: str = "") -> str:
    """Render items one per line as ``<indent>N. item``."""
    return "\n".join(f"{indent}{index}. {item}" for index, item in enumerate(items, start=1))


def display_payload(data: Any) -> str:
    """Render a free-form payload: strings verbatim, anything else as indented JSON."""
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)
