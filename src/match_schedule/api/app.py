from __future__ import annotations

from fastapi import FastAPI

from match_schedule.api.routes.priorities import router as priorities_router
from match_schedule.api.routes.schedule import router as schedule_router
from match_schedule.priorities.store import PriorityStore
from match_schedule.schedule.service import ScheduleService

API_PREFIX = "/schedule/api"


def create_app(service: ScheduleService, store: PriorityStore) -> FastAPI:
    """
    Build the HTTP app around an existing service and store.

    The store is shared by the toggle routes and the service's read path, so
    a toggle is visible to the very next aggregation.
    """

    app = FastAPI(title="match-schedule")
    app.state.schedule_service = service
    app.state.priority_store = store

    app.include_router(schedule_router, prefix=API_PREFIX)
    app.include_router(priorities_router, prefix=API_PREFIX)
    return app
