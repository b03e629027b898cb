# routers/sermons.py

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
from models.sermon import SermonCreate, SermonUpdate


router = APIRouter(
    prefix="/api/sermons",
    tags=["Sermons"]
)

TABLE = "sermons"
COLUMNS = media_columns("image")


# ============================================================
# LIST SERMONS (newest first)
# ============================================================
@router.get("", summary="List Sermons")
def list_sermons():
    rows = safe_select(TABLE, columns=COLUMNS, order="date", desc=True)
    return format_response(rows, entity="sermon")


# ============================================================
# GET SERMON
# ============================================================
@router.get("/{sermon_id}", summary="Get Sermon")
def get_sermon(sermon_id: str):
    row = safe_select(TABLE, {"id": sermon_id}, columns=COLUMNS, single=True)
    if not row:
        raise HTTPException(404, "Sermon not found")
    return format_response(row, entity="sermon")


# ============================================================
# CREATE SERMON
# ============================================================
@router.post(
    "",
    status_code=201,
    summary="Create Sermon",
    dependencies=[Depends(require_staff)],
)
def create_sermon(payload: SermonCreate):
    data = to_media_columns(payload.to_row())
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Sermon created: {row.get('title')}")
    return format_response(row, entity="sermon")


# ============================================================
# UPDATE SERMON
# ============================================================
@router.put(
    "/{sermon_id}",
    summary="Update Sermon",
    dependencies=[Depends(require_staff)],
)
def update_sermon(sermon_id: str, payload: SermonUpdate):
    data = to_media_columns(strip_read_only(payload.to_row(exclude_unset=True)))

    row = safe_update(TABLE, {"id": sermon_id}, data, columns=COLUMNS)
    if not row:
        raise HTTPException(404, "Sermon not found")

    return format_response(row, entity="sermon")


# ============================================================
# DELETE SERMON
# ============================================================
@router.delete(
    "/{sermon_id}",
    summary="Delete Sermon",
    dependencies=[Depends(require_staff)],
)
def delete_sermon(sermon_id: str):
    if not safe_delete(TABLE, {"id": sermon_id}):
        raise HTTPException(404, "Sermon not found")

    logger.info(f"Sermon deleted: {sermon_id}")
    return {"message": "Sermon deleted successfully"}
