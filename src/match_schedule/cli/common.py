from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from match_schedule.core.config import settings
from match_schedule.priorities.store import PriorityStore
from match_schedule.schedule.service import ScheduleService


def open_priority_store() -> PriorityStore:
    return PriorityStore(settings.priorities_path)


@contextmanager
def service_scope(store: PriorityStore | None = None) -> Iterator[ScheduleService]:
    """
    Schedule service wired from settings for CLI commands.
    Ensures the upstream HTTP client is closed.
    """
    service = ScheduleService.from_settings(
        settings,
        priorities=store if store is not None else open_priority_store(),
    )
    try:
        yield service
    finally:
        service.close()
