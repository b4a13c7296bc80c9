from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta
from typing import Any

MINUTES_PER_DAY = 1440

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})")


def parse_event_date(value: Any) -> date | None:
    """
    Best-effort parser for an upstream ISO calendar date ("2025-09-07").

    Returns None instead of raising; a dateless event is dropped by the caller.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def parse_time_of_day(value: Any) -> str:
    """
    Normalize an upstream time-of-day ("19:45:00", "7:05") to "HH:MM".

    Returns "" (time unknown) for missing or out-of-range values.
    """
    if not isinstance(value, str):
        return ""
    m = _HHMM_RE.match(value.strip())
    if m is None:
        return ""
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        return ""
    return f"{hours:02d}:{minutes:02d}"


def to_minutes(hhmm: str) -> int:
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def format_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def apply_time_offset(day: date, raw_time: str, offset_minutes: int) -> tuple[date, str]:
    """
    Shift a (date, "HH:MM") kickoff by a fixed number of minutes.

    Pure calendar arithmetic: the date moves one day per 1440 minutes of
    overflow/underflow, so month and year boundaries (and Feb 29) roll
    correctly and no DST rules are involved. An empty time is returned
    untouched on the original date.
    """
    if not raw_time:
        return day, ""

    total = to_minutes(raw_time) + offset_minutes

    while total >= MINUTES_PER_DAY:
        total -= MINUTES_PER_DAY
        day += timedelta(days=1)
    while total < 0:
        total += MINUTES_PER_DAY
        day -= timedelta(days=1)

    return day, format_minutes(total)


def local_now(offset_minutes: int, *, utc_now: datetime | None = None) -> datetime:
    """Current time in the corrected local frame, as a naive datetime."""

    if utc_now is None:
        utc_now = datetime.now(UTC)
    if utc_now.tzinfo is None:
        utc_now = utc_now.replace(tzinfo=UTC)
    return (utc_now.astimezone(UTC) + timedelta(minutes=offset_minutes)).replace(tzinfo=None)
