# routers/events.py

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional

from dependencies.auth import require_staff
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import (
    media_columns,
    to_media_columns,
    safe_select,
    safe_insert,
    safe_update,
    safe_delete,
)
from core.utils import strip_read_only, utc_now_iso
from models.event import EventCreate, EventUpdate


router = APIRouter(
    prefix="/api/events",
    tags=["Events"]
)

TABLE = "events"
COLUMNS = media_columns("image")


# ============================================================
# LIST EVENTS (soonest first)
# ============================================================
@router.get("", summary="List Events")
def list_events(
    featured: Optional[bool] = Query(None, description="Only featured (true) or non-featured (false) events"),
):
    filters = {"featured": featured} if featured is not None else None
    rows = safe_select(TABLE, filters, columns=COLUMNS, order="startDate")
    return format_response(rows, entity="event")


# ============================================================
# GET EVENT
# ============================================================
@router.get("/{event_id}", summary="Get Event")
def get_event(event_id: str):
    row = safe_select(TABLE, {"id": event_id}, columns=COLUMNS, single=True)
    if not row:
        raise HTTPException(404, "Event not found")
    return format_response(row, entity="event")


# ============================================================
# CREATE EVENT
# ============================================================
@router.post(
    "",
    status_code=201,
    summary="Create Event",
    dependencies=[Depends(require_staff)],
)
def create_event(payload: EventCreate):
    """
    startDate / endDate are parsed into timestamps; the display
    `date` / `time` strings are derived on read when not supplied.
    """
    data = to_media_columns(payload.to_row())
    data["type"] = "event"
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Event created: {row.get('title')}")
    return format_response(row, entity="event")


# ============================================================
# UPDATE EVENT
# ============================================================
@router.put(
    "/{event_id}",
    summary="Update Event",
    dependencies=[Depends(require_staff)],
)
def update_event(event_id: str, payload: EventUpdate):
    data = to_media_columns(strip_read_only(payload.to_row(exclude_unset=True)))
    data["type"] = "event"

    # Moving the event invalidates stored display strings
    if data.get("startDate"):
        data.setdefault("date", None)
        data.setdefault("time", None)

    row = safe_update(TABLE, {"id": event_id}, data, columns=COLUMNS)
    if not row:
        raise HTTPException(404, "Event not found")

    logger.info(f"Event updated: {event_id}")
    return format_response(row, entity="event")


# ============================================================
# DELETE EVENT
# ============================================================
@router.delete(
    "/{event_id}",
    summary="Delete Event",
    dependencies=[Depends(require_staff)],
)
def delete_event(event_id: str):
    if not safe_delete(TABLE, {"id": event_id}):
        raise HTTPException(404, "Event not found")

    logger.info(f"Event deleted: {event_id}")
    return {"message": "Event deleted successfully"}
