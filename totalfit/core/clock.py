"""Wall-clock helpers.

Every "now"/"today" lookup in TotalFit goes through these functions so that
date-relative calculations can be pinned in tests.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utc_now().date()
