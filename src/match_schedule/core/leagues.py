from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SeasonTypeEnum(StrEnum):
    SINGLE = "single"  # "2025"
    RANGE = "range"  # "2025-2026", July to June


@dataclass(frozen=True)
class League:
    id: int
    name: str
    season_type: SeasonTypeEnum


ALLOWED_LEAGUES: tuple[League, ...] = (
    League(4347, "Allsvenskan", SeasonTypeEnum.SINGLE),
    League(4328, "Premier League", SeasonTypeEnum.RANGE),
    League(4480, "Champions League", SeasonTypeEnum.RANGE),
    League(4570, "EFL Cup", SeasonTypeEnum.RANGE),
    League(4429, "Fotbolls-VM", SeasonTypeEnum.RANGE),
    League(4419, "SHL", SeasonTypeEnum.RANGE),
    League(5162, "Hockeyallsvenskan", SeasonTypeEnum.RANGE),
    League(4370, "F1", SeasonTypeEnum.SINGLE),
    League(4373, "IndyCar", SeasonTypeEnum.SINGLE),
    League(4554, "Dart", SeasonTypeEnum.SINGLE),
)
