"""Aggregated schedule endpoint.

Fans out to every configured league, then returns the day-bucketed window.
Per-league failures are absorbed upstream; only a total failure reaches the
client, as a single error object.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from match_schedule.schedule.service import ScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Schedule"])


@router.get("/schedule")
def get_schedule(request: Request):
    """Upcoming matches grouped by corrected calendar date."""
    service: ScheduleService = request.app.state.schedule_service
    try:
        result = service.build()
    except Exception as e:
        logger.exception("Schedule aggregation failed")
        return JSONResponse(status_code=500, content={"error": str(e)})
    return result.to_dict()
