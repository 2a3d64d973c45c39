"""Query accessors for ``student`` rows.

Plain lookups: no business rules, no writes. Multi-row results come back in
whatever order the database returns them.
"""

from __future__ import annotations

import datetime as dt

from sqlalchemy import exists, func, or_
from sqlalchemy.orm import Session, joinedload

from app.models.student import Student
from app.models.teacher import Teacher


def get(db: Session, student_pk: int) -> Student | None:
    return db.get(Student, student_pk)


def find_all(db: Session) -> list[Student]:
    return db.query(Student).all()


def find_all_with_teacher(db: Session) -> list[Student]:
    return db.query(Student).options(joinedload(Student.teacher)).all()


def find_by_email(db: Session, email: str) -> Student | None:
    return db.query(Student).filter(Student.email == email).first()


def find_by_student_id(db: Session, student_id: str) -> Student | None:
    return db.query(Student).filter(Student.student_id == student_id).first()


def find_by_grade_level(db: Session, grade_level: str) -> list[Student]:
    return db.query(Student).filter(Student.grade_level == grade_level).all()


def find_by_teacher_id(db: Session, teacher_id: int) -> list[Student]:
    return db.query(Student).filter(Student.teacher_id == teacher_id).all()


def find_without_teacher(db: Session) -> list[Student]:
    return db.query(Student).filter(Student.teacher_id.is_(None)).all()


def find_by_full_name(db: Session, first_name: str, last_name: str) -> list[Student]:
    return (
        db.query(Student)
        .filter(Student.first_name == first_name, Student.last_name == last_name)
        .all()
    )


def search_by_name(db: Session, fragment: str) -> list[Student]:
    """Case-insensitive substring match on first OR last name.

    ``%`` and ``_`` in ``fragment`` are matched literally.
    """
    return (
        db.query(Student)
        .filter(
            or_(
                Student.first_name.icontains(fragment, autoescape=True),
                Student.last_name.icontains(fragment, autoescape=True),
            )
        )
        .all()
    )


def find_enrolled_between(db: Session, start: dt.date, end: dt.date) -> list[Student]:
    # inclusive on both ends
    return (
        db.query(Student).filter(Student.enrollment_date.between(start, end)).all()
    )


def find_enrolled_after(db: Session, day: dt.date) -> list[Student]:
    return db.query(Student).filter(Student.enrollment_date > day).all()


def find_by_teacher_subject(db: Session, subject: str) -> list[Student]:
    return (
        db.query(Student)
        .join(Student.teacher)
        .filter(Teacher.subject == subject)
        .all()
    )


def exists_by_id(db: Session, student_pk: int) -> bool:
    return db.query(exists().where(Student.id == student_pk)).scalar()


def exists_by_email(db: Session, email: str, *, exclude_pk: int | None = None) -> bool:
    clause = Student.email == email
    if exclude_pk is not None:
        clause = clause & (Student.id != exclude_pk)
    return db.query(exists().where(clause)).scalar()


def exists_by_student_id(
    db: Session, student_id: str, *, exclude_pk: int | None = None
) -> bool:
    clause = Student.student_id == student_id
    if exclude_pk is not None:
        clause = clause & (Student.id != exclude_pk)
    return db.query(exists().where(clause)).scalar()


def count_by_grade_level(db: Session, grade_level: str) -> int:
    return (
        db.query(func.count(Student.id))
        .filter(Student.grade_level == grade_level)
        .scalar()
    )


def count_by_teacher_id(db: Session, teacher_id: int) -> int:
    return (
        db.query(func.count(Student.id))
        .filter(Student.teacher_id == teacher_id)
        .scalar()
    )
