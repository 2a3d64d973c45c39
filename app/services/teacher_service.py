from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.core.logging import get_logger
from app.models.teacher import Teacher
from app.repositories import students as student_repo
from app.repositories import teachers as repo
from app.schemas.common import normalize_email
from app.schemas.teachers import TeacherIn
from app.services.common import commit


def _require(db: Session, teacher_pk: int) -> Teacher:
    teacher = repo.get(db, teacher_pk)
    if teacher is None:
        raise NotFoundError(f"Teacher not found with id: {teacher_pk}")
    return teacher


def create_teacher(db: Session, payload: TeacherIn) -> Teacher:
    if repo.exists_by_email(db, payload.email):
        get_logger().warning("teacher.create.conflict", email=payload.email)
        raise ConflictError(f"Teacher with email {payload.email} already exists")

    teacher = Teacher(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone_number=payload.phone_number,
        subject=payload.subject,
        department=payload.department,
    )
    db.add(teacher)
    commit(
        db,
        on_integrity_error=ConflictError(
            f"Teacher with email {payload.email} already exists"
        ),
    )
    db.refresh(teacher)
    get_logger().info("teacher.created", id=teacher.id, email=teacher.email)
    return teacher


def update_teacher(db: Session, teacher_pk: int, payload: TeacherIn) -> Teacher:
    teacher = _require(db, teacher_pk)
    if payload.email != teacher.email and repo.exists_by_email(
        db, payload.email, exclude_pk=teacher_pk
    ):
        get_logger().warning(
            "teacher.update.conflict", id=teacher_pk, email=payload.email
        )
        raise ConflictError(f"Teacher with email {payload.email} already exists")

    teacher.first_name = payload.first_name
    teacher.last_name = payload.last_name
    teacher.email = payload.email
    teacher.phone_number = payload.phone_number
    teacher.subject = payload.subject
    teacher.department = payload.department

    commit(
        db,
        on_integrity_error=ConflictError(
            f"Teacher with email {payload.email} already exists"
        ),
    )
    db.refresh(teacher)
    get_logger().info("teacher.updated", id=teacher_pk)
    return teacher


def delete_teacher(db: Session, teacher_pk: int) -> int:
    """Delete a teacher after unlinking every student assigned to them.

    Students are kept. Unlinks and the delete share one transaction, so a
    failure leaves every link in place. Returns how many students were
    unlinked.
    """
    teacher = _require(db, teacher_pk)
    assigned = student_repo.find_by_teacher_id(db, teacher_pk)
    try:
        for st in assigned:
            st.teacher_id = None
        # unlinks must reach the database before the DELETE
        db.flush()
        db.delete(teacher)
    except Exception:
        db.rollback()
        raise
    conflict = ConflictError(f"Teacher {teacher_pk} could not be deleted")
    commit(db, on_integrity_error=conflict)
    get_logger().info("teacher.deleted", id=teacher_pk, unlinked=len(assigned))
    return len(assigned)


# --- lookups


def get_all_teachers(db: Session) -> list[Teacher]:
    return repo.find_all(db)


def get_all_teachers_with_students(db: Session) -> list[Teacher]:
    return repo.find_all_with_students(db)


def get_teacher_by_id(db: Session, teacher_pk: int) -> Teacher | None:
    return repo.get(db, teacher_pk)


def get_teacher_by_email(db: Session, email: str) -> Teacher | None:
    return repo.find_by_email(db, normalize_email(email))


def get_teachers_by_department(db: Session, department: str) -> list[Teacher]:
    return repo.find_by_department(db, department)


def get_teachers_by_subject(db: Session, subject: str) -> list[Teacher]:
    return repo.find_by_subject(db, subject)


def get_teachers_by_full_name(
    db: Session, first_name: str, last_name: str
) -> list[Teacher]:
    return repo.find_by_full_name(db, first_name, last_name)


def search_teachers_by_name(db: Session, name: str) -> list[Teacher]:
    return repo.search_by_name(db, name)


def get_teachers_by_department_with_students(
    db: Session, department: str
) -> list[Teacher]:
    return repo.find_by_department_with_students(db, department)


def exists_by_id(db: Session, teacher_pk: int) -> bool:
    return repo.exists_by_id(db, teacher_pk)


def exists_by_email(db: Session, email: str) -> bool:
    return repo.exists_by_email(db, normalize_email(email))


def count_by_department(db: Session, department: str) -> int:
    return repo.count_by_department(db, department)
