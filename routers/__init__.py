# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router, legacy_router as legacy_auth_router

from .sermons import router as sermons_router
from .events import router as events_router
from .leaders import router as leaders_router
from .cell_groups import router as cell_groups_router
from .zones import router as zones_router
from .media import router as media_router
from .foundation_class_sessions import router as foundation_class_sessions_router

from .membership import router as membership_router
from .foundation_classes import router as foundation_classes_router
from .event_signup_requests import router as event_signup_requests_router
from .cell_group_join_requests import router as cell_group_join_requests_router
from .notifications import router as notifications_router

from .health import router as health_router, connection_router


# Everything except the dev-only router; main.create_app mounts that itself
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(legacy_auth_router)

# Website content
api_router.include_router(sermons_router)
api_router.include_router(events_router)
api_router.include_router(leaders_router)
api_router.include_router(cell_groups_router)
api_router.include_router(zones_router)
api_router.include_router(media_router)
api_router.include_router(foundation_class_sessions_router)

# Member requests
api_router.include_router(membership_router)
api_router.include_router(foundation_classes_router)
api_router.include_router(event_signup_requests_router)
api_router.include_router(cell_group_join_requests_router)
api_router.include_router(notifications_router)

# Health
api_router.include_router(health_router)
api_router.include_router(connection_router)

__all__ = ["api_router"]
