from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

from match_schedule.core.config import Settings
from match_schedule.core.leagues import ALLOWED_LEAGUES, League
from match_schedule.ingestion.dates import local_now
from match_schedule.ingestion.fetcher import SeasonEventSource, fetch_all_leagues
from match_schedule.ingestion.providers.base.client import BaseHttpClient
from match_schedule.ingestion.providers.thesportsdb.client import TheSportsDbClient
from match_schedule.priorities.store import PriorityReader
from match_schedule.schedule.aggregator import aggregate_days
from match_schedule.schedule.channels import ChannelResolver
from match_schedule.schedule.models import AggregationResult
from match_schedule.schedule.window import select_window

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class ScheduleService:
    """Fetch, normalize, bucket and window the configured leagues in one call."""

    source: SeasonEventSource
    priorities: PriorityReader
    channels: ChannelResolver = field(default_factory=ChannelResolver)
    leagues: Sequence[League] = ALLOWED_LEAGUES
    offset_minutes: int = 60
    match_duration_minutes: int = 120
    window_days: int = 14
    max_workers: int = 10
    http: BaseHttpClient | None = None
    clock: Callable[[], datetime] = _utc_now

    @classmethod
    def from_settings(
        cls,
        cfg: Settings,
        *,
        priorities: PriorityReader,
        transport: httpx.BaseTransport | None = None,
    ) -> ScheduleService:
        http = BaseHttpClient(
            base_url=cfg.thesportsdb_base_url,
            timeout_s=cfg.fetch_timeout_s,
            connect_timeout_s=cfg.fetch_connect_timeout_s,
            transport=transport,
        )
        channels = (
            ChannelResolver.from_json_file(cfg.channel_rules_path)
            if cfg.channel_rules_path is not None
            else ChannelResolver()
        )
        return cls(
            source=TheSportsDbClient(http=http, api_key=cfg.thesportsdb_api_key),
            priorities=priorities,
            channels=channels,
            offset_minutes=cfg.time_offset_minutes,
            match_duration_minutes=cfg.match_duration_minutes,
            window_days=cfg.window_days,
            max_workers=cfg.fetch_max_workers,
            http=http,
        )

    def close(self) -> None:
        if self.http is not None:
            self.http.close()

    def build(self, *, utc_now: datetime | None = None) -> AggregationResult:
        if utc_now is None:
            utc_now = self.clock()
        now = local_now(self.offset_minutes, utc_now=utc_now)

        results = fetch_all_leagues(self.source, self.leagues, now=now, max_workers=self.max_workers)
        days = aggregate_days(
            results,
            now=now,
            channels=self.channels,
            priorities=self.priorities,
            offset_minutes=self.offset_minutes,
            match_duration_minutes=self.match_duration_minutes,
        )
        window = select_window(days, now.date(), window_days=self.window_days)

        logger.info(
            "Aggregated %d days (%d in window, %d matches)",
            len(days),
            len(window),
            sum(len(d.matches) for d in window),
        )
        return AggregationResult(generated_at=utc_now, days=window)
