"""
Common Pydantic schemas shared across endpoints.
"""
from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    error: str
    detail: Optional[Any] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    database: str
