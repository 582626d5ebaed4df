"""
Centralized, type-safe job status definitions for the JobJourney backend.

This module is the single source of truth for the three representations of
a job application status:

- the symbolic key used in tool parameters (``"initial_interview"``),
- the integer code persisted by the backend and sent on the wire (``3``),
- the display label shown to users (``"Initial Interview"``).

The integer codes are stored by the backend and must never be renumbered.
"""

import logging
from enum import IntEnum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class JobStatus(IntEnum):
    """Job application lifecycle states with their backend integer codes."""

    EXPIRED = 0
    SAVED = 1
    APPLIED = 2
    INITIAL_INTERVIEW = 3
    FINAL_INTERVIEW = 4
    OFFERED = 5
    REJECTED = 6

    @property
    def key(self) -> str:
        """Symbolic key used in tool parameters."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Human-readable display label."""
        return STATUS_LABELS[self]


STATUS_LABELS = {
    JobStatus.EXPIRED: "Expired",
    JobStatus.SAVED: "Saved",
    JobStatus.APPLIED: "Applied",
    JobStatus.INITIAL_INTERVIEW: "Initial Interview",
    JobStatus.FINAL_INTERVIEW: "Final Interview",
    JobStatus.OFFERED: "Offered",
    JobStatus.REJECTED: "Rejected",
}

STATUS_BY_KEY = {status.key: status for status in JobStatus}

# Order used when listing valid options back to the caller
VALID_STATUS_KEYS = (
    "saved",
    "applied",
    "initial_interview",
    "final_interview",
    "offered",
    "rejected",
    "expired",
)

# Unrecognised keys map here when a lenient lookup is requested
FALLBACK_STATUS = JobStatus.SAVED


def lookup_status(key: Optional[str]) -> Optional[JobStatus]:
    """Return the status for a symbolic key, or None when the key is unknown."""
    if key is None:
        return None
    return STATUS_BY_KEY.get(key)


def status_code_for(key: Optional[str]) -> int:
    """
    Translate a symbolic key to its wire code.

    Unknown (or missing) keys resolve to the ``saved`` code. Job creation
    relies on this when no status is supplied.
    """
    status = lookup_status(key)
    if status is None:
        if key is not None:
            logger.warning("Unknown job status key %r, defaulting to %s", key, FALLBACK_STATUS.key)
        return int(FALLBACK_STATUS)
    return int(status)


def status_label(code: Any) -> str:
    """
    Translate a wire code to its display label.

    Accepts ints and numeric strings. Anything outside 0-6 is rendered as the
    raw value.
    """
    try:
        return JobStatus(int(code)).label
    except (TypeError, ValueError):
        return str(code)
