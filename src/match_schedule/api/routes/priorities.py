"""Priority and tag toggle endpoints.

Both toggles persist before responding, so the next schedule request
already reflects them.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from match_schedule.priorities.store import PriorityStore, PriorityStoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Priorities"])


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class PriorityToggleRequest(BaseModel):
    """Flip an event in or out of the priority set."""

    id: str | int | None = None


class TagToggleRequest(BaseModel):
    """Flip a tag on an event."""

    id: str | int | None = None
    tag: str | None = None


class PriorityToggleResponse(BaseModel):
    ok: bool
    eventIds: list[str] | None = None


class TagToggleResponse(BaseModel):
    ok: bool
    tagsForId: list[str] | None = None


# =============================================================================
# ENDPOINTS
# =============================================================================


def _store(request: Request) -> PriorityStore:
    return request.app.state.priority_store


@router.post("/priorities/toggle", response_model=PriorityToggleResponse, response_model_exclude_none=True)
def toggle_priority(body: PriorityToggleRequest, request: Request):
    event_id = "" if body.id is None else str(body.id)
    if not event_id:
        return PriorityToggleResponse(ok=False)

    try:
        event_ids = _store(request).toggle_event_priority(event_id)
    except PriorityStoreError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})

    return PriorityToggleResponse(ok=True, eventIds=event_ids)


@router.post("/tags/toggle", response_model=TagToggleResponse, response_model_exclude_none=True)
def toggle_tag(body: TagToggleRequest, request: Request):
    event_id = "" if body.id is None else str(body.id)
    if not event_id or not body.tag:
        return TagToggleResponse(ok=False)

    try:
        tags = _store(request).toggle_tag(event_id, body.tag)
    except PriorityStoreError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})

    return TagToggleResponse(ok=True, tagsForId=tags)
