"""
FastAPI application entry point.

Student Enrollment API - accepts enrollment forms with an optional photo
and exposes an admin-token-protected listing and delete API.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from limits import parse as parse_limit
from slowapi import Limiter
from slowapi.util import get_remote_address
from app.config import Settings, settings, ensure_directories
from app.context import build_context
from app.database import init_db
from app.exceptions import EnrollmentAPIError
from app.routers import submission, students, health
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the content directory and tables on startup."""
    context = app.state.context
    app_settings = context.settings

    ensure_directories(app_settings)
    context.uploads.ensure_directory()
    init_db(context.engine)
    logger.info(f"Connected to {app_settings.database_url}, uploads in {context.uploads.upload_dir}")

    if app_settings.uses_default_admin_token:
        logger.warning(
            "ADMIN_TOKEN is left at its default value; anyone who knows it can "
            "read and delete enrollment records. Set ADMIN_TOKEN before deploying."
        )

    yield

    context.engine.dispose()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and its context from settings."""
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        description="""
    **Student Enrollment API**

    * `POST /submit` - enrollment form with an optional photo (image/*, max 2 MiB)
    * `GET /api/students` - all records, newest first (admin)
    * `DELETE /api/students/{id}` - remove a record and its photo (admin)

    Admin endpoints require the `x-admin-token` header or `token` query parameter.
    """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )
    app.state.context = build_context(app_settings)

    # Rate limiting, one counter per client address shared by every path
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        enabled=app_settings.RATE_LIMIT_ENABLED,
    )
    rate_limit = parse_limit(app_settings.RATE_LIMIT)

    @app.middleware("http")
    async def enforce_rate_limit(request: Request, call_next):
        limiter = request.app.state.limiter
        if limiter.enabled:
            key = get_remote_address(request)
            if not limiter.limiter.hit(rate_limit, "application", key):
                logger.warning(f"Rate limit exceeded for {key}: {request.method} {request.url.path}")
                return JSONResponse(
                    status_code=429,
                    content={"error": f"Rate limit exceeded: {rate_limit}"}
                )
        return await call_next(request)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    # Include routers
    app.include_router(submission.router, tags=["Submission"])
    app.include_router(students.router, prefix="/api/students", tags=["Admin"])
    app.include_router(health.router, tags=["Health"])

    # Exception handlers
    @app.exception_handler(EnrollmentAPIError)
    async def enrollment_error_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid request",
                "detail": jsonable_encoder(exc.errors())
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )

    # Static files last so the API routes take precedence
    if app_settings.STATIC_DIR:
        app.mount("/", StaticFiles(directory=app_settings.STATIC_DIR, html=True), name="static")

    return app


app = create_app()
