from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # thesportsdb
    thesportsdb_api_key: str = Field(
        default="3",
        validation_alias="THESPORTSDB_KEY",
        repr=False,
    )
    thesportsdb_base_url: str = "https://www.thesportsdb.com/api/v1/json"

    # Upstream fan-out
    fetch_timeout_s: float = 10.0
    fetch_connect_timeout_s: float = 5.0
    fetch_max_workers: int = 10

    # Schedule shaping
    time_offset_minutes: int = 60
    match_duration_minutes: int = 120
    window_days: int = Field(default=14, ge=1)

    # Overlays
    priorities_path: Path = Field(
        default=Path("./priorities.json"),
        validation_alias="PRIORITIES_PATH",
    )
    channel_rules_path: Path | None = None

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


settings = Settings()
