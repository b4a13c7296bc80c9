from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from match_schedule.ingestion.dates import apply_time_offset, to_minutes
from match_schedule.ingestion.fetcher import LeagueFetchResult
from match_schedule.priorities.store import PriorityReader
from match_schedule.schedule.channels import ChannelResolver
from match_schedule.schedule.models import Day, NormalizedMatch

# Provisional kickoff for matches without a time, used only for the elapsed check.
UNKNOWN_TIME_START = time(12, 0)


def _provisional_start(day: date, hhmm: str) -> datetime:
    if not hhmm:
        return datetime.combine(day, UNKNOWN_TIME_START)
    return datetime.combine(day, time(0, 0)) + timedelta(minutes=to_minutes(hhmm))


def _match_sort_key(match: NormalizedMatch) -> tuple[bool, str]:
    # Unknown times after known ones; "HH:MM" compares chronologically as text.
    return (match.time == "", match.time)


def aggregate_days(
    results: Iterable[LeagueFetchResult],
    *,
    now: datetime,
    channels: ChannelResolver,
    priorities: PriorityReader,
    offset_minutes: int,
    match_duration_minutes: int,
) -> list[Day]:
    """
    Bucket every still-relevant event by its corrected calendar date.

    Events without a date are skipped, as are events whose corrected
    start + match duration is already before `now`. Matches in a day are
    ordered by time (unknown last, discovery order on ties); days ascend.
    """

    duration = timedelta(minutes=match_duration_minutes)
    buckets: dict[date, Day] = {}

    for result in results:
        league = result.league
        for ev in result.events:
            if ev.date is None:
                continue

            adj_date, adj_time = apply_time_offset(ev.date, ev.time, offset_minutes)
            if _provisional_start(adj_date, adj_time) + duration < now:
                continue

            match = NormalizedMatch(
                id=ev.id,
                date=adj_date,
                time=adj_time,
                competition=league.name,
                home=ev.home,
                away=ev.away,
                channel=channels.resolve(league.name, f"{ev.home} {ev.away}"),
                priority=priorities.is_priority(ev.id),
                tags=priorities.tags_for(ev.id),
            )

            day = buckets.get(adj_date)
            if day is None:
                day = buckets[adj_date] = Day(date=adj_date)
            day.matches.append(match)

    days = sorted(buckets.values(), key=lambda d: d.date)
    for day in days:
        day.matches.sort(key=_match_sort_key)
    return days
