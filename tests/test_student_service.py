"""Tests for the record store."""
from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.database import create_db_engine, create_session_factory, init_db
from app.exceptions import StorageError
from app.models.student import Student
from app.schemas.student import StudentCreate
from app.services.student_service import StudentService


@pytest.fixture
def db(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def service(db):
    return StudentService(db)


def set_created_at(db, record_id, value):
    db.query(Student).filter(Student.id == record_id).update({Student.created_at: value})
    db.commit()


def test_create_assigns_id_and_timestamp(service, db):
    new_id = service.create(StudentCreate(student_id="S1", first_name="Ann"))

    student = db.get(Student, new_id)
    assert new_id == 1
    assert student.student_id == "S1"
    assert student.first_name == "Ann"
    assert student.surname is None
    assert student.image_file is None
    assert isinstance(student.created_at, datetime)


def test_create_stores_fields_verbatim(service, db):
    fields = StudentCreate(
        student_id="  s-01 ",
        surname="O'Brien",
        first_name="",
        last_name="Ünal",
        dob="not a date",
        religion="x" * 500,
        image_file="123-456.png",
    )

    new_id = service.create(fields)

    student = db.get(Student, new_id)
    assert student.student_id == "  s-01 "
    assert student.surname == "O'Brien"
    assert student.first_name == ""
    assert student.last_name == "Ünal"
    assert student.dob == "not a date"
    assert student.religion == "x" * 500
    assert student.image_file == "123-456.png"


def test_duplicate_student_ids_are_allowed(service):
    first = service.create(StudentCreate(student_id="S1"))
    second = service.create(StudentCreate(student_id="S1"))

    assert second > first


def test_ids_are_not_reused_after_delete(service):
    service.create(StudentCreate(student_id="S1"))
    second = service.create(StudentCreate(student_id="S2"))
    service.delete(second)

    assert service.create(StudentCreate(student_id="S3")) == second + 1


def test_list_all_newest_first_with_ties_in_insertion_order(service, db):
    ids = [service.create(StudentCreate(student_id=f"S{i}")) for i in range(4)]
    set_created_at(db, ids[0], datetime(2024, 5, 1, 9, 0, 0))
    set_created_at(db, ids[1], datetime(2024, 5, 2, 9, 0, 0))
    set_created_at(db, ids[2], datetime(2024, 5, 2, 9, 0, 0))
    set_created_at(db, ids[3], datetime(2024, 5, 1, 9, 0, 0))

    listed = [s.id for s in service.list_all()]

    assert listed == [ids[1], ids[2], ids[0], ids[3]]
    timestamps = [s.created_at for s in service.list_all()]
    assert timestamps == sorted(timestamps, reverse=True)


def test_list_all_empty(service):
    assert service.list_all() == []


def test_get_image_file(service):
    with_image = service.create(StudentCreate(image_file="1-2.jpg"))
    without_image = service.create(StudentCreate())

    assert service.get_image_file(with_image) == "1-2.jpg"
    assert service.get_image_file(without_image) is None
    assert service.get_image_file(12345) is None


def test_delete_returns_row_count(service):
    new_id = service.create(StudentCreate(student_id="S1"))

    assert service.delete(new_id) == 1
    assert service.delete(new_id) == 0
    assert service.list_all() == []


def test_create_wraps_database_errors(service, db, monkeypatch):
    def failing_flush(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "flush", failing_flush)

    with pytest.raises(StorageError) as exc_info:
        service.create(StudentCreate(student_id="S1"))

    assert exc_info.value.message == "Database error"
    assert "INSERT" not in exc_info.value.message
