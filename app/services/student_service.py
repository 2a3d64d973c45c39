from __future__ import annotations

import datetime as dt

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.core.logging import get_logger
from app.models.student import Student
from app.repositories import students as repo
from app.repositories import teachers as teacher_repo
from app.schemas.common import normalize_email
from app.schemas.students import StudentIn
from app.services.common import commit


def _today() -> dt.date:
    return dt.date.today()


def _require(db: Session, student_pk: int) -> Student:
    st = repo.get(db, student_pk)
    if st is None:
        raise NotFoundError(f"Student not found with id: {student_pk}")
    return st


def _conflict_message(payload: StudentIn) -> str:
    if payload.student_id:
        return (
            f"Student with email {payload.email} or ID {payload.student_id} "
            "already exists"
        )
    return f"Student with email {payload.email} already exists"


def create_student(db: Session, payload: StudentIn) -> Student:
    log = get_logger().bind(email=payload.email, student_id=payload.student_id)
    if repo.exists_by_email(db, payload.email):
        log.warning("student.create.conflict", field="email")
        raise ConflictError(f"Student with email {payload.email} already exists")
    if payload.student_id is not None and repo.exists_by_student_id(
        db, payload.student_id
    ):
        log.warning("student.create.conflict", field="student_id")
        raise ConflictError(f"Student with ID {payload.student_id} already exists")

    st = Student(
        student_id=payload.student_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone_number=payload.phone_number,
        enrollment_date=payload.enrollment_date or _today(),
        grade_level=payload.grade_level,
    )
    db.add(st)
    commit(db, on_integrity_error=ConflictError(_conflict_message(payload)))
    db.refresh(st)
    log.info("student.created", id=st.id)
    return st


def update_student(db: Session, student_pk: int, payload: StudentIn) -> Student:
    """Overwrite every mutable field of a student.

    The teacher link is left alone. A missing ``enrollment_date`` keeps the
    stored one.
    """
    st = _require(db, student_pk)
    log = get_logger().bind(id=student_pk)

    if payload.email != st.email and repo.exists_by_email(
        db, payload.email, exclude_pk=student_pk
    ):
        log.warning("student.update.conflict", field="email")
        raise ConflictError(f"Student with email {payload.email} already exists")
    if (
        payload.student_id is not None
        and payload.student_id != st.student_id
        and repo.exists_by_student_id(db, payload.student_id, exclude_pk=student_pk)
    ):
        log.warning("student.update.conflict", field="student_id")
        raise ConflictError(f"Student with ID {payload.student_id} already exists")

    st.first_name = payload.first_name
    st.last_name = payload.last_name
    st.email = payload.email
    st.phone_number = payload.phone_number
    if payload.enrollment_date is not None:
        st.enrollment_date = payload.enrollment_date
    st.grade_level = payload.grade_level
    st.student_id = payload.student_id

    commit(db, on_integrity_error=ConflictError(_conflict_message(payload)))
    db.refresh(st)
    log.info("student.updated")
    return st


def assign_teacher_to_student(db: Session, student_pk: int, teacher_pk: int) -> Student:
    st = _require(db, student_pk)
    missing_teacher = NotFoundError(f"Teacher not found with id: {teacher_pk}")
    teacher = teacher_repo.get(db, teacher_pk)
    if teacher is None:
        raise missing_teacher

    st.teacher_id = teacher.id
    # a teacher deleted since the lookup above fails the FK here
    commit(db, on_integrity_error=missing_teacher)
    db.refresh(st)
    get_logger().info("student.teacher.assigned", id=student_pk, teacher_id=teacher_pk)
    return st


def remove_teacher_from_student(db: Session, student_pk: int) -> Student:
    st = _require(db, student_pk)
    previous = st.teacher_id
    st.teacher_id = None
    conflict = ConflictError(f"Student {student_pk} could not be unlinked")
    commit(db, on_integrity_error=conflict)
    db.refresh(st)
    get_logger().info("student.teacher.removed", id=student_pk, teacher_id=previous)
    return st


def delete_student(db: Session, student_pk: int) -> None:
    st = _require(db, student_pk)
    db.delete(st)
    conflict = ConflictError(f"Student {student_pk} could not be deleted")
    commit(db, on_integrity_error=conflict)
    get_logger().info("student.deleted", id=student_pk)


# --- lookups


def get_all_students(db: Session) -> list[Student]:
    return repo.find_all(db)


def get_all_students_with_teacher(db: Session) -> list[Student]:
    return repo.find_all_with_teacher(db)


def get_student_by_id(db: Session, student_pk: int) -> Student | None:
    return repo.get(db, student_pk)


def get_student_by_email(db: Session, email: str) -> Student | None:
    return repo.find_by_email(db, normalize_email(email))


def get_student_by_student_id(db: Session, student_id: str) -> Student | None:
    return repo.find_by_student_id(db, student_id)


def get_students_by_grade_level(db: Session, grade_level: str) -> list[Student]:
    return repo.find_by_grade_level(db, grade_level)


def get_students_by_teacher_id(db: Session, teacher_pk: int) -> list[Student]:
    return repo.find_by_teacher_id(db, teacher_pk)


def get_students_without_teacher(db: Session) -> list[Student]:
    return repo.find_without_teacher(db)


def get_students_by_full_name(
    db: Session, first_name: str, last_name: str
) -> list[Student]:
    return repo.find_by_full_name(db, first_name, last_name)


def search_students_by_name(db: Session, name: str) -> list[Student]:
    return repo.search_by_name(db, name)


def get_students_by_teacher_subject(db: Session, subject: str) -> list[Student]:
    return repo.find_by_teacher_subject(db, subject)


def get_students_enrolled_between(
    db: Session, start: dt.date, end: dt.date
) -> list[Student]:
    return repo.find_enrolled_between(db, start, end)


def get_students_enrolled_after(db: Session, day: dt.date) -> list[Student]:
    return repo.find_enrolled_after(db, day)


def exists_by_id(db: Session, student_pk: int) -> bool:
    return repo.exists_by_id(db, student_pk)


def exists_by_email(db: Session, email: str) -> bool:
    return repo.exists_by_email(db, normalize_email(email))


def exists_by_student_id(db: Session, student_id: str) -> bool:
    return repo.exists_by_student_id(db, student_id)


def count_by_grade_level(db: Session, grade_level: str) -> int:
    return repo.count_by_grade_level(db, grade_level)


def count_by_teacher(db: Session, teacher_pk: int) -> int:
    return repo.count_by_teacher_id(db, teacher_pk)
