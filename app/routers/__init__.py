"""
Routers package initialization.
"""
from app.routers import submission
from app.routers import students
from app.routers import health

__all__ = [
    "submission",
    "students",
    "health",
]
