from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from match_schedule.ingestion.dates import parse_event_date, parse_time_of_day

ApiItem = dict[str, Any]


@dataclass(frozen=True)
class RawEvent:
    id: str
    date: date | None
    time: str  # "HH:MM" or "" when unknown
    home: str
    away: str


def _first_str(item: ApiItem, *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return ""


def parse_raw_event(item: ApiItem) -> RawEvent:
    """Map one TheSportsDB event object onto a RawEvent, tolerating missing fields."""

    raw_id = item.get("idEvent")
    return RawEvent(
        id="" if raw_id is None else str(raw_id),
        date=parse_event_date(_first_str(item, "dateEvent", "dateEventLocal")),
        time=parse_time_of_day(_first_str(item, "strTime", "strTimeLocal")[:5]),
        home=_first_str(item, "strHomeTeam"),
        away=_first_str(item, "strAwayTeam"),
    )
