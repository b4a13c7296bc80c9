from __future__ import annotations

from dataclasses import dataclass

from match_schedule.ingestion.providers.base.client import BaseHttpClient
from match_schedule.ingestion.providers.base.errors import ProviderResponseError
from match_schedule.ingestion.providers.thesportsdb.parser import RawEvent, parse_raw_event


@dataclass
class TheSportsDbClient:
    """
    TheSportsDB v1 JSON API.

    The API key is a path segment: GET /{key}/eventsseason.php?id=...&s=...
    """

    http: BaseHttpClient
    api_key: str

    def get_season_events(self, league_id: int | str, season: str) -> list[RawEvent]:
        payload = self.http.get_json(
            f"/{self.api_key}/eventsseason.php",
            params={"id": str(league_id), "s": season},
        )

        # Seasons with no fixtures come back as {"events": null}.
        items = payload.get("events")
        if items is None:
            return []
        if not isinstance(items, list):
            raise ProviderResponseError(
                f"Expected 'events' list for league={league_id} season={season}, "
                f"got {type(items).__name__}"
            )

        return [parse_raw_event(i) for i in items if isinstance(i, dict)]
