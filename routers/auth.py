# routers/auth.py

from fastapi import APIRouter, HTTPException, Depends

from core.logging_config import logger
from core.rate_limiter import rate_limit
from core.security import create_access_token, verify_password
from core.supabase_helpers import safe_select
from dependencies.auth import get_current_user, CurrentUser
from models.auth import LoginRequest, LoginResponse, AuthUser


router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
)

# Older admin builds post to /login at the root
legacy_router = APIRouter(tags=["Auth"])

LOGIN_RATE_LIMIT = 5  # attempts per window
LOGIN_RATE_WINDOW_SECONDS = 60


# ============================================================
# LOGIN (username / password against the users table)
# ============================================================
def authenticate(payload: LoginRequest) -> LoginResponse:
    username = (payload.username or "").strip()
    if not username or not payload.password:
        raise HTTPException(400, "Username and password are required")

    user = safe_select("users", {"username": username}, single=True)
    if not user or not verify_password(payload.password, user.get("hashedPassword")):
        logger.warning(f"Login failed for user '{username}'")
        raise HTTPException(401, "Invalid username or password")

    token = create_access_token(user)
    logger.info(f"Login successful for user: {username}")

    return LoginResponse(
        token=token,
        user=AuthUser(
            id=str(user["id"]),
            username=user["username"],
            role=user.get("role") or "user",
            name=user.get("name"),
        ),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Authenticate user",
    dependencies=[Depends(rate_limit("login", LOGIN_RATE_LIMIT, LOGIN_RATE_WINDOW_SECONDS))],
)
def login(payload: LoginRequest):
    return authenticate(payload)


@legacy_router.post(
    "/login",
    response_model=LoginResponse,
    summary="Authenticate user (legacy path)",
    dependencies=[Depends(rate_limit("login", LOGIN_RATE_LIMIT, LOGIN_RATE_WINDOW_SECONDS))],
)
def legacy_login(payload: LoginRequest):
    return authenticate(payload)


# ============================================================
# AUTH STATUS
# ============================================================
@router.get("/status", summary="Check the bearer token")
def auth_status(current_user: CurrentUser = Depends(get_current_user)):
    return {"authenticated": True, "user": current_user.model_dump()}
