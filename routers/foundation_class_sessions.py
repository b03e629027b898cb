# routers/foundation_class_sessions.py

from fastapi import APIRouter, HTTPException, Depends, Query

from dependencies.auth import require_staff
from core.date_utils import format_date_to_string, parse_date
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import strip_read_only, utc_now_iso
from models.foundation_class_session import SessionCreate, SessionUpdate


router = APIRouter(
    prefix="/api/foundation-class-sessions",
    tags=["Foundation Class Sessions"]
)

TABLE = "foundation_class_sessions"


def with_derived_fields(row: dict) -> dict:
    """Attach `spotsLeft` and the "Month D, YYYY - Month D, YYYY" `dateRange`."""
    capacity = row.get("capacity") or 0
    enrolled = row.get("enrolledCount") or 0
    row["spotsLeft"] = max(0, capacity - enrolled)

    start = format_date_to_string(parse_date(row.get("startDate")))
    end = format_date_to_string(parse_date(row.get("endDate")))
    row["dateRange"] = f"{start} - {end}" if start and end else None
    return row


def _format(row: dict) -> dict:
    return format_response(with_derived_fields(row), entity="foundation-class-session")


@router.get("", summary="List Foundation Class Sessions")
def list_sessions(
    show_all: bool = Query(False, alias="showAll", description="Include inactive sessions"),
):
    filters = None if show_all else {"active": True}
    rows = safe_select(TABLE, filters, order="startDate")
    logger.info(f"Found {len(rows)} foundation class sessions")
    return [_format(row) for row in rows]


@router.get("/{session_id}", summary="Get Foundation Class Session")
def get_session(session_id: str):
    row = safe_select(TABLE, {"id": session_id}, single=True)
    if not row:
        raise HTTPException(404, "Foundation class session not found")
    return _format(row)


@router.post(
    "",
    status_code=201,
    summary="Create Foundation Class Session",
    dependencies=[Depends(require_staff)],
)
def create_session(payload: SessionCreate):
    data = payload.to_row()
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Foundation class session created: {row.get('id')}")
    return _format(row)


@router.put(
    "/{session_id}",
    summary="Update Foundation Class Session",
    dependencies=[Depends(require_staff)],
)
def update_session(session_id: str, payload: SessionUpdate):
    data = strip_read_only(payload.to_row(exclude_unset=True))

    row = safe_update(TABLE, {"id": session_id}, data)
    if not row:
        raise HTTPException(404, "Foundation class session not found")

    return _format(row)


@router.delete(
    "/{session_id}",
    summary="Delete Foundation Class Session",
    dependencies=[Depends(require_staff)],
)
def delete_session(session_id: str):
    if not safe_delete(TABLE, {"id": session_id}):
        raise HTTPException(404, "Foundation class session not found")

    logger.info(f"Foundation class session deleted: {session_id}")
    return {"message": "Foundation class session deleted successfully"}


@router.post(
    "/{session_id}/increment-enrollment",
    summary="Increment Enrollment",
    dependencies=[Depends(require_staff)],
)
def increment_enrollment(session_id: str):
    session = safe_select(TABLE, {"id": session_id}, single=True)
    if not session:
        raise HTTPException(404, "Foundation class session not found")

    enrolled = session.get("enrolledCount") or 0
    if enrolled >= (session.get("capacity") or 0):
        raise HTTPException(400, "Session is at full capacity")

    row = safe_update(
        TABLE,
        {"id": session_id},
        {"enrolledCount": enrolled + 1, "updatedAt": utc_now_iso()},
    )
    return _format(row)
