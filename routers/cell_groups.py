# routers/cell_groups.py

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
from models.cell_group import CellGroupCreate, CellGroupUpdate


router = APIRouter(
    prefix="/api/cell-groups",
    tags=["Cell Groups"]
)

TABLE = "cell_groups"
COLUMNS = media_columns("image", "leaderImage") + ", zone:zoneId(*)"


def _ensure_zone(zone_id: Optional[str]):
    if zone_id and not safe_select("zones", {"id": zone_id}, columns="id", single=True):
        raise HTTPException(400, "Zone not found")


@router.get("", summary="List Cell Groups (alphabetical)")
def list_cell_groups(
    zone_id: Optional[str] = Query(None, alias="zoneId"),
):
    filters = {"zoneId": zone_id} if zone_id else None
    rows = safe_select(TABLE, filters, columns=COLUMNS, order="name")
    return format_response(rows, entity="cell-group")


@router.get("/{group_id}", summary="Get Cell Group")
def get_cell_group(group_id: str):
    row = safe_select(TABLE, {"id": group_id}, columns=COLUMNS, single=True)
    if not row:
        raise HTTPException(404, "Cell group not found")
    return format_response(row, entity="cell-group")


@router.post(
    "",
    status_code=201,
    summary="Create Cell Group",
    dependencies=[Depends(require_staff)],
)
def create_cell_group(payload: CellGroupCreate):
    _ensure_zone(payload.zone_id)

    data = to_media_columns(payload.to_row())
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Cell group created: {row.get('name')}")
    return format_response(row, entity="cell-group")


@router.put(
    "/{group_id}",
    summary="Update Cell Group",
    dependencies=[Depends(require_staff)],
)
def update_cell_group(group_id: str, payload: CellGroupUpdate):
    _ensure_zone(payload.zone_id)

    data = to_media_columns(strip_read_only(payload.to_row(exclude_unset=True)))

    row = safe_update(TABLE, {"id": group_id}, data, columns=COLUMNS)
    if not row:
        raise HTTPException(404, "Cell group not found")

    return format_response(row, entity="cell-group")


@router.delete(
    "/{group_id}",
    summary="Delete Cell Group",
    dependencies=[Depends(require_staff)],
)
def delete_cell_group(group_id: str):
    if not safe_delete(TABLE, {"id": group_id}):
        raise HTTPException(404, "Cell group not found")

    logger.info(f"Cell group deleted: {group_id}")
    return {"message": "Cell group deleted successfully"}
