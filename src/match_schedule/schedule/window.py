from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from match_schedule.schedule.models import Day


def select_window(days: Sequence[Day], today: date, *, window_days: int = 14) -> list[Day]:
    """
    Pick the days to show, given `days` sorted ascending.

    1. Every day in [today, today + window_days - 1].
    2. Otherwise the first `window_days` days from today onward.
    3. Otherwise the first `window_days` days overall; stale data beats an
       empty schedule.
    """

    end = today + timedelta(days=window_days - 1)

    in_window = [d for d in days if today <= d.date <= end]
    if in_window:
        return in_window

    upcoming = [d for d in days if d.date >= today]
    if upcoming:
        return upcoming[:window_days]

    return list(days[:window_days])
