"""
Liveness and health endpoints.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app.context import AppContext
from app.dependencies import get_context
from app.schemas.common import HealthResponse

router = APIRouter()


@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"


@router.get("/api/health", response_model=HealthResponse)
def health_check(context: AppContext = Depends(get_context)):
    """Health check endpoint."""
    # Check database connection
    try:
        with context.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "version": context.settings.VERSION,
        "database": db_status
    }
