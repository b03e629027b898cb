from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from core.config import settings
from core.logging_config import logger
from core.security import decode_access_token, is_dev_token


bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# Current User Model
# ============================================================
class CurrentUser(BaseModel):
    id: str
    username: str
    role: str
    name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


DEV_USER = CurrentUser(id="dev-admin", username="admin", role="admin", name="Dev Admin")


# ============================================================
# AUTH DECODING (HS256 JWT issued by /api/auth/login)
# ============================================================
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:

    if not credentials or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    # ---------------------------------------------------------
    # DEV TOKENS (local development only)
    # ---------------------------------------------------------
    if is_dev_token(token):
        if settings.dev_auth_active:
            return DEV_USER
        logger.warning("Rejected dev token outside development auth mode")
        raise unauthorized

    claims = decode_access_token(token)
    if not claims or not claims.get("sub"):
        raise unauthorized

    return CurrentUser(
        id=str(claims["sub"]),
        username=claims.get("username") or "",
        role=claims.get("role") or "user",
        name=claims.get("name"),
    )


# ============================================================
# ROLE CHECKERS
# ============================================================
def requires_role(allowed_roles: list[str]):
    def checker(current_user: CurrentUser = Depends(get_current_user)):
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=403,
                detail=f"Requires one of: {allowed_roles}",
            )
        return current_user
    return checker


# request workflows, notifications
require_admin = requires_role(["admin"])

# content management (sermons, events, media, ...)
require_staff = requires_role(["admin", "editor"])
