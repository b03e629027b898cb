# routers/health.py

from fastapi import APIRouter, Request

from core.config import settings
from core.supabase_client import ping_supabase
from core.utils import utc_now_iso

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)

# Connectivity probe used by the website's API client
connection_router = APIRouter(
    prefix="/api",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /api/test-connection
# -----------------------------------------------------
@connection_router.get("/test-connection", summary="Client connectivity probe")
async def test_connection(request: Request):
    return {
        "success": True,
        "message": "Server connection successful",
        "requestInfo": {
            "method": request.method,
            "path": request.url.path,
            "timestamp": utc_now_iso(),
        },
    }


# -----------------------------------------------------
# GET /health/db
# Checks Supabase connection + table queries
# No auth required
# -----------------------------------------------------
@router.get("/db", summary="Supabase / DB health check")
async def health_db():
    """
    Verifies Supabase connectivity by reading one row from each
    content table. Safe for external health monitors (no auth required).
    """
    status = ping_supabase()
    return {
        "service": "Supabase",
        "status": status.get("status", "unknown"),
        "details": status,
    }


# -----------------------------------------------------
# GET /health/app
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    return {
        "service": settings.PROJECT_NAME,
        "status": "ok",
    }
