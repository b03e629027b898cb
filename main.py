# main.py

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.config_validator import validate_config_on_startup
from core.errors import WorkflowError
from core.logging_config import logger

from routers import api_router
from routers.dev_auth import router as dev_auth_router


def _register_error_handlers(app: FastAPI) -> None:
    # Content routes answer {"detail"}; workflow routes {"success": false, "error"}

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403) or exc.status_code >= 500:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(WorkflowError)
    async def handle_workflow(request: Request, exc: WorkflowError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.error}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def _website_url() -> str:
    domain = settings.FRONTEND_DOMAIN
    if not domain:
        return "/docs"
    return domain if domain.startswith("http") else f"https://{domain}"


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Victory Bible Church API: website content and member requests",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup():
        logger.info(f"Starting {settings.PROJECT_NAME} (ENV={settings.ENV})")
        validate_config_on_startup(strict=settings.ENV == "production")

        if settings.dev_auth_active:
            logger.warning("Development auth is ENABLED; dev-token bearers are accepted")

        if settings.SEED_ON_STARTUP:
            from jobs.seed_data import run as run_seed
            run_seed()

    _register_error_handlers(app)

    app.include_router(api_router)
    if settings.dev_auth_active:
        app.include_router(dev_auth_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(_website_url())

    return app


app = create_app()
