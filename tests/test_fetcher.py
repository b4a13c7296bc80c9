from __future__ import annotations

import threading
from datetime import date, datetime

from match_schedule.core.leagues import League, SeasonTypeEnum
from match_schedule.ingestion.fetcher import fetch_all_leagues, fetch_events_for_league
from match_schedule.ingestion.providers.base.errors import ProviderRequestError
from match_schedule.ingestion.providers.thesportsdb.parser import RawEvent

NOW = datetime(2025, 3, 10, 11, 0)

PREMIER_LEAGUE = League(4328, "Premier League", SeasonTypeEnum.RANGE)
ALLSVENSKAN = League(4347, "Allsvenskan", SeasonTypeEnum.SINGLE)
SHL = League(4419, "SHL", SeasonTypeEnum.RANGE)


def _event(event_id: str) -> RawEvent:
    return RawEvent(id=event_id, date=date(2025, 3, 12), time="18:00", home="A", away="B")


class FakeSource:
    def __init__(self, seasons: dict[tuple[int, str], list[RawEvent]], failing: dict[int, Exception] | None = None) -> None:
        self.seasons = seasons
        self.failing = failing or {}
        self.calls: list[tuple[int, str]] = []
        self._lock = threading.Lock()

    def get_season_events(self, league_id: int | str, season: str) -> list[RawEvent]:
        with self._lock:
            self.calls.append((int(league_id), season))
        if int(league_id) in self.failing:
            raise self.failing[int(league_id)]
        return list(self.seasons.get((int(league_id), season), []))


def test_current_season_hit_makes_a_single_request() -> None:
    source = FakeSource({(4328, "2024-2025"): [_event("1")]})

    result = fetch_events_for_league(source, PREMIER_LEAGUE, now=NOW)

    assert [e.id for e in result.events] == ["1"]
    assert result.season == "2024-2025"
    assert result.used_fallback is False
    assert source.calls == [(4328, "2024-2025")]


def test_empty_current_season_falls_back_once() -> None:
    source = FakeSource({(4347, "2024"): [_event("9")]})

    result = fetch_events_for_league(source, ALLSVENSKAN, now=NOW)

    assert [e.id for e in result.events] == ["9"]
    assert result.season == "2024"
    assert result.used_fallback is True
    assert source.calls == [(4347, "2025"), (4347, "2024")]


def test_empty_fallback_yields_no_events_and_no_third_request() -> None:
    source = FakeSource({})

    result = fetch_events_for_league(source, PREMIER_LEAGUE, now=NOW)

    assert result.events == []
    assert result.error is None
    assert len(source.calls) == 2


def test_provider_error_becomes_empty_result() -> None:
    source = FakeSource({}, failing={4328: ProviderRequestError("timeout")})

    result = fetch_events_for_league(source, PREMIER_LEAGUE, now=NOW)

    assert result.events == []
    assert result.error == "timeout"


def test_fan_out_keeps_league_order_and_isolates_failures() -> None:
    source = FakeSource(
        {(4328, "2024-2025"): [_event("1")], (4419, "2024-2025"): [_event("3")]},
        failing={4347: RuntimeError("boom")},
    )

    results = fetch_all_leagues(source, [PREMIER_LEAGUE, ALLSVENSKAN, SHL], now=NOW, max_workers=3)

    assert [r.league.name for r in results] == ["Premier League", "Allsvenskan", "SHL"]
    assert [e.id for e in results[0].events] == ["1"]
    assert results[1].events == []
    assert results[1].error == "boom"
    assert [e.id for e in results[2].events] == ["3"]


def test_fan_out_with_no_leagues() -> None:
    assert fetch_all_leagues(FakeSource({}), [], now=NOW) == []


class BarrierSource:
    """Only returns once every league's request is in flight at the same time."""

    def __init__(self, parties: int) -> None:
        self.barrier = threading.Barrier(parties, timeout=5)

    def get_season_events(self, league_id: int | str, season: str) -> list[RawEvent]:
        self.barrier.wait()
        return [_event(str(league_id))]


def test_fan_out_runs_league_fetches_concurrently() -> None:
    leagues = [League(i, f"League {i}", SeasonTypeEnum.SINGLE) for i in range(1, 6)]

    results = fetch_all_leagues(BarrierSource(len(leagues)), leagues, now=NOW, max_workers=10)

    assert [r.error for r in results] == [None] * len(leagues)
    assert [r.events[0].id for r in results] == ["1", "2", "3", "4", "5"]
