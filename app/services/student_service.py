"""
Student service - record store for enrollment submissions.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.exceptions import StorageError
from app.models.student import Student
from app.schemas.student import StudentCreate
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

# Returned to clients; the SQLAlchemy error itself is only logged
DATABASE_ERROR = "Database error"


class StudentService:
    """Create, list, look up and delete enrollment records."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, fields: StudentCreate) -> int:
        """
        Insert a new record.

        Business fields are stored exactly as given; ``id`` and
        ``created_at`` are assigned by the database.

        Returns:
            The new record id

        Raises:
            StorageError: if the insert fails
        """
        student = Student(**fields.model_dump())
        try:
            self.db.add(student)
            self.db.flush()
            new_id = student.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Insert error: {e}")
            raise StorageError(DATABASE_ERROR) from e

        logger.info(f"Added new record ID: {new_id}")
        return new_id

    def list_all(self) -> List[Student]:
        """
        All records, newest first.

        Records sharing a ``created_at`` value keep their insertion order.
        """
        try:
            return (
                self.db.query(Student)
                .order_by(Student.created_at.desc(), Student.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"List error: {e}")
            raise StorageError(DATABASE_ERROR) from e

    def get_image_file(self, student_id: int) -> Optional[str]:
        """Image filename of a record; None if the record has none or does not exist."""
        try:
            row = (
                self.db.query(Student.image_file)
                .filter(Student.id == student_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Lookup error: {e}")
            raise StorageError(DATABASE_ERROR) from e
        return row[0] if row else None

    def delete(self, student_id: int) -> int:
        """Delete a record. Returns the number of rows removed (0 or 1)."""
        try:
            deleted = (
                self.db.query(Student)
                .filter(Student.id == student_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Delete error: {e}")
            raise StorageError(DATABASE_ERROR) from e
        return deleted
