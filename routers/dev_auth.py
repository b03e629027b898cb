# routers/dev_auth.py

from fastapi import APIRouter, HTTPException
import time

from core.config import settings
from core.logging_config import logger
from core.security import DEV_TOKEN_PREFIX
from dependencies.auth import DEV_USER

router = APIRouter(prefix="/api/auth", tags=["Auth (Dev Only)"])


@router.post("/dev-login", summary="DEV: Get an instant admin token")
def dev_login():
    """
    DEV ONLY. Returns a `dev-token-*` bearer that `get_current_user`
    accepts as the dev admin while DEV_AUTH_ENABLED is set and
    ENV=development. Mounted only in that mode.
    """
    if not settings.dev_auth_active:
        raise HTTPException(404, "Not Found")

    logger.warning("Issuing development admin token")
    return {
        "token": f"{DEV_TOKEN_PREFIX}{int(time.time() * 1000)}",
        "user": DEV_USER.model_dump(),
    }
