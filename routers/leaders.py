# routers/leaders.py

from fastapi import APIRouter, HTTPException, Depends

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
from models.leader import LeaderCreate, LeaderUpdate


router = APIRouter(
    prefix="/api/leaders",
    tags=["Leaders"]
)

TABLE = "leaders"
COLUMNS = media_columns("image")


@router.get("", summary="List Leaders (display order)")
def list_leaders():
    rows = safe_select(TABLE, columns=COLUMNS, order="order")
    return format_response(rows, entity="leader")


@router.get("/{leader_id}", summary="Get Leader")
def get_leader(leader_id: str):
    row = safe_select(TABLE, {"id": leader_id}, columns=COLUMNS, single=True)
    if not row:
        raise HTTPException(404, "Leader not found")
    return format_response(row, entity="leader")


@router.post(
    "",
    status_code=201,
    summary="Create Leader",
    dependencies=[Depends(require_staff)],
)
def create_leader(payload: LeaderCreate):
    data = to_media_columns(payload.to_row())
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Leader created: {row.get('name')}")
    return format_response(row, entity="leader")


@router.put(
    "/{leader_id}",
    summary="Update Leader",
    dependencies=[Depends(require_staff)],
)
def update_leader(leader_id: str, payload: LeaderUpdate):
    data = to_media_columns(strip_read_only(payload.to_row(exclude_unset=True)))

    row = safe_update(TABLE, {"id": leader_id}, data, columns=COLUMNS)
    if not row:
        raise HTTPException(404, "Leader not found")

    return format_response(row, entity="leader")


@router.delete(
    "/{leader_id}",
    summary="Delete Leader",
    dependencies=[Depends(require_staff)],
)
def delete_leader(leader_id: str):
    if not safe_delete(TABLE, {"id": leader_id}):
        raise HTTPException(404, "Leader not found")

    logger.info(f"Leader deleted: {leader_id}")
    return {"message": "Leader deleted successfully"}
