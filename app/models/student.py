"""
Student SQLAlchemy model.
Stores one row per enrollment form submission.
"""
from sqlalchemy import Column, Integer, Text, DateTime, func
from app.database import Base


class Student(Base):
    """
    Students table model.

    Column names keep the form's field names (studentID, firstName, ...);
    the Python attributes are snake_case.
    """
    __tablename__ = "students"

    # Primary key; AUTOINCREMENT so ids of deleted rows are never reused
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Form fields, stored verbatim
    student_id = Column("studentID", Text)
    surname = Column(Text)
    first_name = Column("firstName", Text)
    last_name = Column("lastName", Text)
    dob = Column(Text)
    religion = Column(Text)

    # Filename relative to the content directory
    image_file = Column("imageFile", Text)

    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self):
        return f"<Student(id={self.id}, student_id={self.student_id}, image_file={self.image_file})>"
