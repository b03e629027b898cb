# routers/zones.py

from collections import Counter

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
    safe_count,
)
from core.utils import strip_read_only, utc_now_iso
from models.zone import ZoneCreate, ZoneUpdate


router = APIRouter(
    prefix="/api/zones",
    tags=["Zones"]
)

TABLE = "zones"
COLUMNS = media_columns("image", "coverImage")
CELL_GROUP_COLUMNS = media_columns("image", "leaderImage")


# ============================================================
# LIST ZONES (with cell group counts)
# ============================================================
@router.get("", summary="List Zones")
def list_zones():
    rows = safe_select(TABLE, columns=COLUMNS, order="name")

    counts = Counter(
        g.get("zoneId") for g in safe_select("cell_groups", columns="id, zoneId")
    )
    for row in rows:
        row["cellCount"] = counts.get(row.get("id"), 0)

    return format_response(rows, entity="zone")


# ============================================================
# GET ZONE
# ============================================================
@router.get("/{zone_id}", summary="Get Zone")
def get_zone(zone_id: str):
    row = safe_select(TABLE, {"id": zone_id}, columns=COLUMNS, single=True)
    if not row:
        raise HTTPException(404, "Zone not found")

    row["cellCount"] = safe_count("cell_groups", {"zoneId": zone_id})
    return format_response(row, entity="zone")


# ============================================================
# CELL GROUPS IN ZONE
# ============================================================
@router.get("/{zone_id}/cell-groups", summary="List Cell Groups in Zone")
def list_zone_cell_groups(zone_id: str):
    if not safe_select(TABLE, {"id": zone_id}, columns="id", single=True):
        raise HTTPException(404, "Zone not found")

    rows = safe_select(
        "cell_groups", {"zoneId": zone_id}, columns=CELL_GROUP_COLUMNS, order="name"
    )
    return format_response(rows, entity="cell-group")


# ============================================================
# CREATE ZONE
# ============================================================
@router.post(
    "",
    status_code=201,
    summary="Create Zone",
    dependencies=[Depends(require_staff)],
)
def create_zone(payload: ZoneCreate):
    data = to_media_columns(payload.to_row())
    data["createdAt"] = data["updatedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Zone created: {row.get('name')}")
    row["cellCount"] = 0
    return format_response(row, entity="zone")


# ============================================================
# UPDATE ZONE
# ============================================================
@router.put(
    "/{zone_id}",
    summary="Update Zone",
    dependencies=[Depends(require_staff)],
)
def update_zone(zone_id: str, payload: ZoneUpdate):
    data = to_media_columns(strip_read_only(payload.to_row(exclude_unset=True)))

    row = safe_update(TABLE, {"id": zone_id}, data, columns=COLUMNS)
    if not row:
        raise HTTPException(404, "Zone not found")

    return format_response(row, entity="zone")


# ============================================================
# DELETE ZONE (refused while cell groups reference it)
# ============================================================
@router.delete(
    "/{zone_id}",
    summary="Delete Zone",
    dependencies=[Depends(require_staff)],
)
def delete_zone(zone_id: str):
    in_use = safe_count("cell_groups", {"zoneId": zone_id})
    if in_use:
        raise HTTPException(
            400,
            f"Cannot delete zone with {in_use} associated cell groups. "
            "Please reassign or delete the cell groups first.",
        )

    if not safe_delete(TABLE, {"id": zone_id}):
        raise HTTPException(404, "Zone not found")

    logger.info(f"Zone deleted: {zone_id}")
    return {"message": "Zone deleted successfully"}
