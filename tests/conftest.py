from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import httpx
import pytest

from match_schedule.core.leagues import League, SeasonTypeEnum
from match_schedule.ingestion.providers.base.client import BaseHttpClient
from match_schedule.ingestion.providers.thesportsdb.client import TheSportsDbClient
from match_schedule.priorities.store import PriorityStore
from match_schedule.schedule.service import ScheduleService

# 11:00 on 2025-03-10 in the corrected (+60) local frame.
UTC_NOW = datetime(2025, 3, 10, 10, 0, tzinfo=UTC)

PREMIER_LEAGUE = League(4328, "Premier League", SeasonTypeEnum.RANGE)
ALLSVENSKAN = League(4347, "Allsvenskan", SeasonTypeEnum.SINGLE)

SEASON_EVENTS: dict[tuple[str, str], list[dict]] = {
    ("4328", "2024-2025"): [
        {
            "idEvent": "1001",
            "dateEvent": "2025-03-12",
            "strTime": "19:00:00",
            "strHomeTeam": "Arsenal",
            "strAwayTeam": "Chelsea",
        },
        {
            "idEvent": "1000",
            "dateEvent": "2025-03-01",
            "strTime": "15:00:00",
            "strHomeTeam": "Fulham",
            "strAwayTeam": "Brentford",
        },
    ],
    ("4347", "2025"): [],
    ("4347", "2024"): [
        {
            "idEvent": "2001",
            "dateEvent": "2025-03-11",
            "strTime": "17:00:00",
            "strHomeTeam": "AIK",
            "strAwayTeam": "Hammarby",
        }
    ],
}


def make_handler(
    season_events: dict[tuple[str, str], list[dict]],
    calls: list[tuple[str, str]] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        key = (request.url.params["id"], request.url.params["s"])
        if calls is not None:
            calls.append(key)
        events = season_events.get(key)
        return httpx.Response(200, json={"events": events or None})

    return handler


@pytest.fixture
def priority_store(tmp_path: Path) -> PriorityStore:
    return PriorityStore(tmp_path / "priorities.json")


@pytest.fixture
def make_service(priority_store: PriorityStore):
    services: list[ScheduleService] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        leagues: tuple[League, ...] = (PREMIER_LEAGUE, ALLSVENSKAN),
        clock: Callable[[], datetime] = lambda: UTC_NOW,
    ) -> ScheduleService:
        http = BaseHttpClient(
            base_url="https://example.test/api/v1/json",
            transport=httpx.MockTransport(handler or make_handler(SEASON_EVENTS)),
        )
        service = ScheduleService(
            source=TheSportsDbClient(http=http, api_key="3"),
            priorities=priority_store,
            leagues=leagues,
            http=http,
            clock=clock,
        )
        services.append(service)
        return service

    yield factory

    for service in services:
        service.close()
