"""
Models package initialization.
"""
from app.models.student import Student

__all__ = ["Student"]
