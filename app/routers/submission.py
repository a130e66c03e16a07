"""
Public enrollment form submission endpoint.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData
from app.database import get_db
from app.dependencies import get_upload_handler
from app.exceptions import StorageError
from app.schemas.common import ErrorResponse
from app.schemas.student import StudentCreate, SubmitResponse
from app.services.student_service import StudentService
from app.services.upload_service import ImageUploadHandler
from typing import Dict, Optional

router = APIRouter()

# Form field name -> StudentCreate attribute
FORM_FIELDS = {
    "studentID": "student_id",
    "surname": "surname",
    "firstName": "first_name",
    "lastName": "last_name",
    "dob": "dob",
    "religion": "religion",
}

SUBMIT_FORM_SCHEMA = {
    "requestBody": {
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        **{name: {"type": "string"} for name in FORM_FIELDS},
                        "image": {"type": "string", "format": "binary"},
                    },
                }
            }
        }
    }
}


def form_fields(form: FormData) -> Dict[str, Optional[str]]:
    """Text fields exactly as sent; missing fields are None, empty ones stay ''."""
    fields = {}
    for name, attr in FORM_FIELDS.items():
        value = form.get(name)
        fields[attr] = value if isinstance(value, str) else None
    return fields


@router.post(
    "/submit",
    response_model=SubmitResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra=SUBMIT_FORM_SCHEMA,
)
async def submit_enrollment(
    request: Request,
    db: Session = Depends(get_db),
    uploads: ImageUploadHandler = Depends(get_upload_handler),
):
    """
    Store one enrollment form.

    The optional image (field ``image``, image/*, max 2 MiB) is validated
    and written first; a rejected upload fails the request before any
    record exists.
    """
    form = await request.form()
    try:
        image = uploads.single_image(form)
        image_file = await uploads.save(image)
        fields = StudentCreate(**form_fields(form), image_file=image_file)
    finally:
        await form.close()

    service = StudentService(db)
    try:
        new_id = await run_in_threadpool(service.create, fields)
    except StorageError:
        # Don't leave the stored image orphaned
        if image_file:
            uploads.remove(image_file)
        raise

    return {"success": True, "id": new_id}
