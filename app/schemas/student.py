"""
Student Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, Field, AliasChoices, field_serializer
from typing import Optional
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _camel(name: str, alias: str):
    """Accept both the attribute name and the form's camelCase name; emit camelCase."""
    return Field(
        None,
        validation_alias=AliasChoices(name, alias),
        serialization_alias=alias,
    )


class StudentFields(BaseModel):
    """Business fields of an enrollment form, all optional and unvalidated."""
    student_id: Optional[str] = _camel("student_id", "studentID")
    surname: Optional[str] = None
    first_name: Optional[str] = _camel("first_name", "firstName")
    last_name: Optional[str] = _camel("last_name", "lastName")
    dob: Optional[str] = None
    religion: Optional[str] = None


class StudentCreate(StudentFields):
    """Everything needed to insert a record."""
    image_file: Optional[str] = _camel("image_file", "imageFile")


class StudentRecord(StudentCreate):
    """Single stored enrollment record."""
    id: int
    created_at: datetime

    class Config:
        from_attributes = True

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: datetime) -> str:
        # SQLite CURRENT_TIMESTAMP text, UTC
        return value.strftime(TIMESTAMP_FORMAT)


class SubmitResponse(BaseModel):
    success: bool = True
    id: int


class DeleteResponse(BaseModel):
    success: bool = True
    deleted: int = Field(..., ge=0, le=1)
