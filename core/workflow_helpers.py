# core/workflow_helpers.py

from typing import Callable, Optional, Type

from pydantic import BaseModel, ValidationError

from core.errors import WorkflowError
from core.logging_config import logger
from core.validation import StatusCheck, ValidationResult


def validated_submission(
    body: Optional[dict],
    validator: Callable[[dict], ValidationResult],
    model: Type[BaseModel],
    label: str,
):
    """
    Run a public submission through its rule table, then parse it.

    Raises WorkflowError(400) carrying the per-field `errors` map.
    """
    body = body or {}

    result = validator(body)
    if not result.is_valid:
        logger.info(f"Rejected {label} submission: {sorted(result.errors)}")
        raise WorkflowError(400, "Validation failed", errors=result.errors)

    try:
        return model.model_validate(body)
    except ValidationError as e:
        errors = {
            ".".join(str(part) for part in err["loc"]): err["msg"]
            for err in e.errors()
        }
        logger.info(f"Rejected {label} submission: {sorted(errors)}")
        raise WorkflowError(400, "Validation failed", errors=errors)


def require_valid_status(check: StatusCheck, message: Optional[str] = None, **extra):
    """Raise WorkflowError(400) for a rejected status transition."""
    if not check.is_valid:
        raise WorkflowError(400, message or check.error, **extra)
