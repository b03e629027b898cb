# routers/cell_group_join_requests.py

from fastapi import APIRouter, HTTPException, Depends, Body
from typing import Optional

from dependencies.auth import require_admin
from core.email_utils import send_quietly, send_cell_group_join_request_emails
from core.errors import WorkflowError
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import utc_now_iso
from core.validation import validate_join_request_status_change
from models.enums import JoinRequestStatus
from models.join_request import JoinRequestCreate, JoinRequestStatusUpdate


router = APIRouter(
    prefix="/api/cell-group-join-requests",
    tags=["Cell Group Join Requests"]
)

TABLE = "cell_group_join_requests"
ENTITY = "cell-group-join-request"
COLUMNS = "*, cellGroup:cellGroupId(*, zone:zoneId(*))"

REQUIRED_FIELDS = ("cellGroupId", "name", "email", "phone")


@router.post("", status_code=201, summary="Submit Cell Group Join Request")
def submit_join_request(body: Optional[dict] = Body(None)):
    body = body or {}
    if any(not body.get(field) for field in REQUIRED_FIELDS):
        raise WorkflowError(
            400,
            "Please provide all required fields: cellGroupId, name, email, phone",
        )

    join_request = JoinRequestCreate.model_validate(body)

    cell_group = safe_select("cell_groups", {"id": join_request.cell_group_id}, single=True)
    if not cell_group:
        raise WorkflowError(404, "Cell group not found")

    now = utc_now_iso()
    data = join_request.to_row()
    data.update({
        "status": JoinRequestStatus.pending.value,
        "createdAt": now,
        "updatedAt": now,
    })

    row = safe_insert(TABLE, data)
    if not row:
        raise WorkflowError(500, "Failed to submit join request")

    logger.info(f"Join request for {cell_group.get('name')} saved: {row.get('id')}")
    send_quietly(send_cell_group_join_request_emails, row, cell_group)

    return {
        "success": True,
        "message": "Join request submitted successfully",
        "request": format_response(row, entity=ENTITY),
    }


@router.get("", summary="List Join Requests", dependencies=[Depends(require_admin)])
def list_join_requests():
    rows = safe_select(TABLE, columns=COLUMNS, order="createdAt", desc=True)
    return format_response(rows, entity=ENTITY)


@router.get(
    "/cell-group/{cell_group_id}",
    summary="List Join Requests for a Cell Group",
    dependencies=[Depends(require_admin)],
)
def list_cell_group_join_requests(cell_group_id: str):
    rows = safe_select(TABLE, {"cellGroupId": cell_group_id}, order="createdAt", desc=True)
    return format_response(rows, entity=ENTITY)


@router.put("/{request_id}", summary="Update Join Request Status", dependencies=[Depends(require_admin)])
def update_join_request_status(request_id: str, payload: JoinRequestStatusUpdate):
    if not validate_join_request_status_change(payload.status).is_valid:
        raise WorkflowError(
            400,
            "Please provide a valid status: pending, approved, or rejected",
        )

    row = safe_update(
        TABLE,
        {"id": request_id},
        {"status": payload.status, "updatedAt": utc_now_iso()},
        columns=COLUMNS,
    )
    if not row:
        raise WorkflowError(404, "Join request not found")

    logger.info(f"Join request {request_id} marked {payload.status}")
    return format_response(row, entity=ENTITY)


@router.delete("/{request_id}", summary="Delete Join Request", dependencies=[Depends(require_admin)])
def delete_join_request(request_id: str):
    if not safe_delete(TABLE, {"id": request_id}):
        raise HTTPException(404, "Join request not found")

    return {"message": "Join request deleted successfully"}
