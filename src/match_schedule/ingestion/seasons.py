from __future__ import annotations

import re
from datetime import date, datetime

from match_schedule.core.leagues import League, SeasonTypeEnum

_RANGE_RE = re.compile(r"(\d{4})-(\d{4})")

# First month of a July-to-June competition year.
RANGE_SEASON_START_MONTH = 7


def current_season(league: League, now: date | datetime) -> str:
    """Season identifier the upstream source uses for `league` at `now`.

    Single-year leagues use the calendar year ("2025"). Range leagues span
    July to June, so January 2026 still belongs to "2025-2026".
    """

    if league.season_type == SeasonTypeEnum.SINGLE:
        return str(now.year)

    start_year = now.year if now.month >= RANGE_SEASON_START_MONTH else now.year - 1
    return f"{start_year}-{start_year + 1}"


def previous_season(league: League, season: str) -> str:
    """Season immediately before `season`.

    A season string that does not have the expected shape is returned
    unchanged; the fallback fetch then simply repeats the original query.
    """

    if league.season_type == SeasonTypeEnum.SINGLE:
        try:
            return str(int(season) - 1)
        except ValueError:
            return season

    m = _RANGE_RE.search(season)
    if m is None:
        return season
    return f"{int(m.group(1)) - 1}-{int(m.group(2)) - 1}"
