"""
Schemas package initialization.
"""
from app.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from app.schemas.student import (
    StudentFields,
    StudentCreate,
    StudentRecord,
    SubmitResponse,
    DeleteResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Student
    "StudentFields",
    "StudentCreate",
    "StudentRecord",
    "SubmitResponse",
    "DeleteResponse",
]
