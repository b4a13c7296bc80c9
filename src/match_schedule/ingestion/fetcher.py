from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from match_schedule.core.leagues import League
from match_schedule.ingestion.providers.base.errors import ProviderError
from match_schedule.ingestion.providers.thesportsdb.parser import RawEvent
from match_schedule.ingestion.seasons import current_season, previous_season

logger = logging.getLogger(__name__)


class SeasonEventSource(Protocol):
    def get_season_events(self, league_id: int | str, season: str) -> list[RawEvent]: ...


@dataclass(frozen=True)
class LeagueFetchResult:
    league: League
    season: str
    events: list[RawEvent] = field(default_factory=list)
    used_fallback: bool = False
    error: str | None = None


def fetch_events_for_league(
    source: SeasonEventSource,
    league: League,
    *,
    now: datetime,
) -> LeagueFetchResult:
    """
    Fetch one league's events for its current season.

    An empty current season triggers exactly one request for the previous
    season, whose result replaces the empty one. Provider failures are
    returned as `error` with no events.
    """

    season = current_season(league, now)
    try:
        events = source.get_season_events(league.id, season)
        if events:
            return LeagueFetchResult(league=league, season=season, events=events)

        prev = previous_season(league, season)
        logger.info("No events for %s season %s, falling back to %s", league.name, season, prev)
        events = source.get_season_events(league.id, prev)
        return LeagueFetchResult(league=league, season=prev, events=events, used_fallback=True)
    except ProviderError as e:
        logger.warning("Fetch error for %s (season %s): %s", league.name, season, e)
        return LeagueFetchResult(league=league, season=season, error=str(e))


def fetch_all_leagues(
    source: SeasonEventSource,
    leagues: Sequence[League],
    *,
    now: datetime,
    max_workers: int = 10,
) -> list[LeagueFetchResult]:
    """
    Fetch every league concurrently and wait for all of them.

    Results come back in `leagues` order. A task that dies with an unexpected
    exception is recorded as a failed, empty result so it cannot take its
    siblings down with it.
    """

    if not leagues:
        return []

    def fetch_one(league: League) -> LeagueFetchResult:
        try:
            return fetch_events_for_league(source, league, now=now)
        except Exception as e:
            logger.error("Unexpected error fetching %s: %s", league.name, e, exc_info=True)
            return LeagueFetchResult(league=league, season=current_season(league, now), error=str(e))

    results: dict[int, LeagueFetchResult] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(len(leagues), max_workers))) as executor:
        futures = {executor.submit(fetch_one, league): i for i, league in enumerate(leagues)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    ordered = [results[i] for i in range(len(leagues))]
    failed = sum(1 for r in ordered if r.error)
    logger.info(
        "Fetched %d leagues: events=%d failed=%d",
        len(ordered),
        sum(len(r.events) for r in ordered),
        failed,
    )
    return ordered
