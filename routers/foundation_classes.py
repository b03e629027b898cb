# routers/foundation_classes.py

from fastapi import APIRouter, HTTPException, Depends, Body
from typing import Optional

from dependencies.auth import require_admin
from core.email_utils import (
    send_quietly,
    send_foundation_class_registration_emails,
    send_foundation_class_completion_email,
)
from core.errors import WorkflowError
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import utc_now_iso
from core.validation import (
    FOUNDATION_CLASS_STATUSES,
    validate_foundation_class_registration,
    validate_foundation_class_status_change,
)
from core.workflow_helpers import validated_submission, require_valid_status
from models.enums import FoundationClassStatus
from models.foundation_class import FoundationClassRegistrationCreate, RegistrationStatusUpdate


router = APIRouter(
    prefix="/api/foundation-classes",
    tags=["Foundation Classes"]
)

TABLE = "foundation_class_registrations"
ENTITY = "foundation-class-registration"


@router.post("/register", status_code=201, summary="Register for Foundation Classes")
def register(body: Optional[dict] = Body(None)):
    registration = validated_submission(
        body,
        validate_foundation_class_registration,
        FoundationClassRegistrationCreate,
        "foundation class registration",
    )

    data = registration.to_row()
    now = utc_now_iso()
    data.update({
        "registrationDate": now,
        "status": FoundationClassStatus.registered.value,
        "createdAt": now,
        "updatedAt": now,
    })

    row = safe_insert(TABLE, data)
    if not row:
        raise WorkflowError(500, "Failed to submit registration. Please try again later.")

    logger.info(f"Foundation class registration saved: {row.get('id')}")
    send_quietly(send_foundation_class_registration_emails, row)

    return {
        "success": True,
        "message": "Foundation classes registration submitted successfully",
        "data": format_response(row, entity=ENTITY),
    }


@router.get(
    "/registrations",
    summary="List Registrations (newest first)",
    dependencies=[Depends(require_admin)],
)
def list_registrations():
    rows = safe_select(TABLE, order="registrationDate", desc=True)
    return format_response(rows, entity=ENTITY)


@router.get(
    "/registrations/{registration_id}",
    summary="Get Registration",
    dependencies=[Depends(require_admin)],
)
def get_registration(registration_id: str):
    row = safe_select(TABLE, {"id": registration_id}, single=True)
    if not row:
        raise HTTPException(404, "Foundation class registration not found")
    return format_response(row, entity=ENTITY)


@router.put(
    "/registrations/{registration_id}",
    summary="Update Registration Status",
    dependencies=[Depends(require_admin)],
)
def update_registration_status(registration_id: str, payload: RegistrationStatusUpdate):
    status = payload.status
    logger.info(f"Updating foundation class registration {registration_id} status to: {status}")

    require_valid_status(
        validate_foundation_class_status_change(status),
        allowedValues=FOUNDATION_CLASS_STATUSES,
    )

    row = safe_update(
        TABLE,
        {"id": registration_id},
        {"status": status, "updatedAt": utc_now_iso()},
    )
    if not row:
        raise WorkflowError(404, "Foundation class registration not found")

    if status == FoundationClassStatus.completed:
        send_quietly(send_foundation_class_completion_email, row)

    return {
        "success": True,
        "message": f"Foundation class registration {status}",
        "data": format_response(row, entity=ENTITY),
    }


@router.delete(
    "/registrations/{registration_id}",
    summary="Delete Registration",
    dependencies=[Depends(require_admin)],
)
def delete_registration(registration_id: str):
    if not safe_delete(TABLE, {"id": registration_id}):
        raise HTTPException(404, "Foundation class registration not found")

    logger.info(f"Foundation class registration deleted: {registration_id}")
    return {"success": True, "message": "Registration deleted successfully"}
