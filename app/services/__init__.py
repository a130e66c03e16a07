"""
Services package initialization.
"""
from app.services.student_service import StudentService
from app.services.upload_service import ImageUploadHandler

__all__ = [
    "StudentService",
    "ImageUploadHandler",
]
