# routers/event_signup_requests.py

from fastapi import APIRouter, HTTPException, Depends, Body
from typing import Optional

from dependencies.auth import require_admin
from core.errors import WorkflowError
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import utc_now_iso
from core.validation import (
    EVENT_SIGNUP_STATUSES,
    validate_event_signup,
    validate_event_signup_status_change,
)
from core.workflow_helpers import validated_submission, require_valid_status
from models.enums import SignupStatus
from models.event_signup import EventSignupCreate, SignupStatusUpdate


router = APIRouter(
    prefix="/api/event-signup-requests",
    tags=["Event Signup Requests"]
)

TABLE = "event_signup_requests"
ENTITY = "event-signup"
COLUMNS = "*, event:eventId(*)"


def _list(filters: dict = None):
    rows = safe_select(TABLE, filters, columns=COLUMNS, order="submittedAt", desc=True)
    return format_response(rows, entity=ENTITY)


# ============================================================
# ADMIN LISTINGS
# ============================================================
@router.get("", summary="List Event Signup Requests", dependencies=[Depends(require_admin)])
def list_signup_requests():
    return _list()


@router.get(
    "/type/{event_type}",
    summary="List Signup Requests by Event Type",
    dependencies=[Depends(require_admin)],
)
def list_by_event_type(event_type: str):
    return _list({"eventType": event_type})


@router.get(
    "/event/{event_id}",
    summary="List Signup Requests for an Event",
    dependencies=[Depends(require_admin)],
)
def list_by_event(event_id: str):
    return _list({"eventId": event_id})


# ============================================================
# SUBMIT (public)
# ============================================================
@router.post("", status_code=201, summary="Submit Event Signup Request")
def submit_signup_request(body: Optional[dict] = Body(None)):
    signup = validated_submission(
        body, validate_event_signup, EventSignupCreate, "event signup"
    )

    if not safe_select("events", {"id": signup.event_id}, columns="id", single=True):
        raise WorkflowError(404, "Event not found")

    data = signup.to_row()
    data["eventType"] = signup.event_type.value
    data["status"] = SignupStatus.pending.value
    data["submittedAt"] = utc_now_iso()

    row = safe_insert(TABLE, data, columns=COLUMNS)
    if not row:
        raise WorkflowError(500, "Failed to create signup request")

    logger.info(f"Event signup request saved: {row.get('id')} ({signup.event_type})")
    return format_response(row, entity=ENTITY)


# ============================================================
# UPDATE STATUS / DELETE (admin)
# ============================================================
@router.put("/{request_id}", summary="Update Signup Request Status", dependencies=[Depends(require_admin)])
def update_signup_status(request_id: str, payload: SignupStatusUpdate):
    require_valid_status(
        validate_event_signup_status_change(payload.status),
        "Invalid status value",
        allowedValues=EVENT_SIGNUP_STATUSES,
    )

    row = safe_update(
        TABLE,
        {"id": request_id},
        {"status": payload.status},
        columns=COLUMNS,
    )
    if not row:
        raise WorkflowError(404, "Signup request not found")

    logger.info(f"Event signup request {request_id} marked {payload.status}")
    return format_response(row, entity=ENTITY)


@router.delete("/{request_id}", summary="Delete Signup Request", dependencies=[Depends(require_admin)])
def delete_signup_request(request_id: str):
    if not safe_delete(TABLE, {"id": request_id}):
        raise HTTPException(404, "Signup request not found")

    return {"message": "Signup request deleted successfully"}
