# routers/membership.py

from fastapi import APIRouter, HTTPException, Depends, Body
from typing import Optional

from dependencies.auth import require_admin
from core.email_utils import (
    send_quietly,
    send_membership_renewal_emails,
    send_membership_approval_email,
)
from core.errors import WorkflowError
from core.formatting import format_response
from core.logging_config import logger
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import utc_now_iso
from core.validation import validate_membership_renewal, validate_membership_status_change
from core.workflow_helpers import validated_submission, require_valid_status
from models.enums import RenewalStatus
from models.membership import MemberRenewalCreate, RenewalStatusUpdate


router = APIRouter(
    prefix="/api/membership",
    tags=["Membership Renewals"]
)

TABLE = "membership_renewals"
ENTITY = "membership-renewal"


# ============================================================
# SUBMIT RENEWAL (public)
# ============================================================
@router.post("/renew", status_code=201, summary="Submit Membership Renewal")
def submit_renewal(body: Optional[dict] = Body(None)):
    renewal = validated_submission(
        body, validate_membership_renewal, MemberRenewalCreate, "membership renewal"
    )

    data = renewal.to_row()
    now = utc_now_iso()
    data.update({
        "renewalDate": now,
        "status": RenewalStatus.pending.value,
        "createdAt": now,
        "updatedAt": now,
    })

    row = safe_insert(TABLE, data)
    if not row:
        raise WorkflowError(500, "Failed to submit membership renewal. Please try again later.")

    logger.info(f"Membership renewal saved: {row.get('id')}")
    send_quietly(send_membership_renewal_emails, row)

    return {
        "success": True,
        "message": "Membership renewal submitted successfully",
        "data": format_response(row, entity=ENTITY),
    }


# ============================================================
# LIST / GET (admin)
# ============================================================
@router.get(
    "/renewals",
    summary="List Membership Renewals (newest first)",
    dependencies=[Depends(require_admin)],
)
def list_renewals():
    rows = safe_select(TABLE, order="renewalDate", desc=True)
    return format_response(rows, entity=ENTITY)


@router.get(
    "/renewals/{renewal_id}",
    summary="Get Membership Renewal",
    dependencies=[Depends(require_admin)],
)
def get_renewal(renewal_id: str):
    row = safe_select(TABLE, {"id": renewal_id}, single=True)
    if not row:
        raise HTTPException(404, "Membership renewal not found")
    return format_response(row, entity=ENTITY)


# ============================================================
# UPDATE STATUS (admin)
# ============================================================
@router.put(
    "/renewals/{renewal_id}",
    summary="Update Membership Renewal Status",
    dependencies=[Depends(require_admin)],
)
def update_renewal_status(renewal_id: str, payload: RenewalStatusUpdate):
    status = payload.status
    logger.info(f"Updating membership renewal {renewal_id} status to: {status}")

    require_valid_status(
        validate_membership_status_change(status),
        "Invalid status value. Must be 'pending', 'approved', or 'declined'.",
    )

    row = safe_update(
        TABLE,
        {"id": renewal_id},
        {"status": status, "updatedAt": utc_now_iso()},
    )
    if not row:
        raise WorkflowError(404, "Membership renewal not found")

    if status == RenewalStatus.approved:
        send_quietly(send_membership_approval_email, row)

    return {
        "success": True,
        "message": f"Membership renewal {status}",
        "data": format_response(row, entity=ENTITY),
    }


# ============================================================
# DELETE (admin)
# ============================================================
@router.delete(
    "/renewals/{renewal_id}",
    summary="Delete Membership Renewal",
    dependencies=[Depends(require_admin)],
)
def delete_renewal(renewal_id: str):
    if not safe_delete(TABLE, {"id": renewal_id}):
        raise HTTPException(404, "Membership renewal not found")

    logger.info(f"Membership renewal deleted: {renewal_id}")
    return {"success": True, "message": "Membership renewal deleted successfully"}
