"""
Admin API endpoints for stored enrollment records.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_upload_handler, require_admin
from app.schemas.common import ErrorResponse
from app.schemas.student import DeleteResponse, StudentRecord
from app.services.student_service import StudentService
from app.services.upload_service import ImageUploadHandler
from typing import List, Optional
import re

INTEGER_ID = re.compile(r"-?[0-9]+")

router = APIRouter(
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}},
)


@router.get("", response_model=List[StudentRecord])
def list_students(db: Session = Depends(get_db)):
    """Get all records, newest first."""
    service = StudentService(db)
    return [StudentRecord.model_validate(s) for s in service.list_all()]


def parse_record_id(raw: str) -> Optional[int]:
    """Integer id from the path, or None if it is not a plain integer."""
    if not INTEGER_ID.fullmatch(raw):
        return None
    value = int(raw)
    # Outside SQLite's 64-bit range nothing can match
    if not -2**63 <= value < 2**63:
        return None
    return value


@router.delete("/{student_id}", response_model=DeleteResponse)
def delete_student(
    student_id: str,
    db: Session = Depends(get_db),
    uploads: ImageUploadHandler = Depends(get_upload_handler),
):
    """
    Delete a record and its image.

    The image is removed first on a best-effort basis. An unknown or
    non-numeric id matches no record and is reported as ``deleted: 0``.
    """
    record_id = parse_record_id(student_id)
    if record_id is None:
        return {"success": True, "deleted": 0}

    service = StudentService(db)

    image_file = service.get_image_file(record_id)
    if image_file:
        uploads.remove(image_file)

    deleted = service.delete(record_id)
    return {"success": True, "deleted": deleted}
