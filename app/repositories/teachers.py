from __future__ import annotations

from sqlalchemy import exists, func, or_
from sqlalchemy.orm import Session, joinedload

from app.models.teacher import Teacher


def get(db: Session, teacher_pk: int) -> Teacher | None:
    return db.get(Teacher, teacher_pk)


def find_all(db: Session) -> list[Teacher]:
    return db.query(Teacher).all()


def find_all_with_students(db: Session) -> list[Teacher]:
    return db.query(Teacher).options(joinedload(Teacher.students)).all()


def find_by_department_with_students(db: Session, department: str) -> list[Teacher]:
    return (
        db.query(Teacher)
        .options(joinedload(Teacher.students))
        .filter(Teacher.department == department)
        .all()
    )


def find_by_email(db: Session, email: str) -> Teacher | None:
    return db.query(Teacher).filter(Teacher.email == email).first()


def find_by_department(db: Session, department: str) -> list[Teacher]:
    return db.query(Teacher).filter(Teacher.department == department).all()


def find_by_subject(db: Session, subject: str) -> list[Teacher]:
    return db.query(Teacher).filter(Teacher.subject == subject).all()


def find_by_full_name(db: Session, first_name: str, last_name: str) -> list[Teacher]:
    return (
        db.query(Teacher)
        .filter(Teacher.first_name == first_name, Teacher.last_name == last_name)
        .all()
    )


def search_by_name(db: Session, fragment: str) -> list[Teacher]:
    return (
        db.query(Teacher)
        .filter(
            or_(
                Teacher.first_name.icontains(fragment, autoescape=True),
                Teacher.last_name.icontains(fragment, autoescape=True),
            )
        )
        .all()
    )


def exists_by_id(db: Session, teacher_pk: int) -> bool:
    return db.query(exists().where(Teacher.id == teacher_pk)).scalar()


def exists_by_email(db: Session, email: str, *, exclude_pk: int | None = None) -> bool:
    clause = Teacher.email == email
    if exclude_pk is not None:
        clause = clause & (Teacher.id != exclude_pk)
    return db.query(exists().where(clause)).scalar()


def count_by_department(db: Session, department: str) -> int:
    return (
        db.query(func.count(Teacher.id))
        .filter(Teacher.department == department)
        .scalar()
    )
