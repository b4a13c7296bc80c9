from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class NormalizedMatch:
    id: str
    date: date
    time: str  # "HH:MM" after correction, "" when unknown
    competition: str
    home: str
    away: str
    channel: str
    priority: bool
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "time": self.time,
            "competition": self.competition,
            "home": self.home,
            "away": self.away,
            "channel": self.channel,
            "priority": self.priority,
            "tags": list(self.tags),
        }


@dataclass
class Day:
    date: date
    matches: list[NormalizedMatch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "matches": [m.to_dict() for m in self.matches]}


@dataclass(frozen=True)
class AggregationResult:
    generated_at: datetime
    days: list[Day]

    def to_dict(self) -> dict[str, Any]:
        return {
            "generatedAt": self.generated_at.isoformat().replace("+00:00", "Z"),
            "days": [d.to_dict() for d in self.days],
        }
