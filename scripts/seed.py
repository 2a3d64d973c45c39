# scripts/seed.py
from __future__ import annotations

import os
import random
from datetime import date, timedelta

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.db import SessionLocal
from app.models.student import Student
from app.models.teacher import Teacher
from app.repositories import students as student_repo
from app.repositories import teachers as teacher_repo
from app.schemas.students import StudentIn
from app.schemas.teachers import TeacherIn
from app.services import student_service, teacher_service

# ---------------- Configurable through ENV ----------------
SEED_STUDENTS_PER_TEACHER = int(os.getenv("SEED_STUDENTS_PER_TEACHER", "4"))
SEED_RANDOM = random.Random(int(os.getenv("SEED_RANDOM", "42")))

# ---------------- Example data ----------------
TEACHERS_DATA = [
    {"first_name": "Ada", "last_name": "Lovelace", "subject": "Math", "department": "Science"},
    {"first_name": "Alan", "last_name": "Turing", "subject": "Computing", "department": "Science"},
    {"first_name": "Jane", "last_name": "Austen", "subject": "Literature", "department": "Humanities"},
]

STUDENT_NAMES = [
    ("Bob", "Lee"),
    ("Carla", "Dias"),
    ("Daniel", "Nogueira"),
    ("Elena", "Alves"),
    ("Frank", "Lima"),
    ("Grace", "Hopper"),
    ("Hana", "Souza"),
    ("Ivan", "Petrov"),
    ("Julia", "Andrade"),
    ("Kenji", "Sato"),
    ("Laura", "Costa"),
    ("Marco", "Rossi"),
]

GRADES = ["9", "10", "11", "12"]


def ensure_teachers(db: Session) -> list[Teacher]:
    teachers = []
    for data in TEACHERS_DATA:
        email = f"{data['first_name'].lower()}.{data['last_name'].lower()}@school.example.com"
        teacher = teacher_repo.find_by_email(db, email)
        if teacher is None:
            teacher = teacher_service.create_teacher(db, TeacherIn(email=email, **data))
            print(f"[Seed] Teacher created: {teacher.first_name} {teacher.last_name}")
        teachers.append(teacher)
    return teachers


def ensure_students(db: Session, teachers: list[Teacher]) -> list[Student]:
    students = []
    names = iter(STUDENT_NAMES)
    for teacher in teachers:
        for _ in range(SEED_STUDENTS_PER_TEACHER):
            try:
                first, last = next(names)
            except StopIteration:
                return students
            email = f"{first.lower()}.{last.lower()}@student.example.com"
            st = student_repo.find_by_email(db, email)
            if st is None:
                st = student_service.create_student(
                    db,
                    StudentIn(
                        student_id=f"S{len(students) + 1:04d}",
                        first_name=first,
                        last_name=last,
                        email=email,
                        enrollment_date=date.today()
                        - timedelta(days=SEED_RANDOM.randint(0, 3 * 365)),
                        grade_level=SEED_RANDOM.choice(GRADES),
                    ),
                )
                st = student_service.assign_teacher_to_student(db, st.id, teacher.id)
                print(f"[Seed] Student created: {st.first_name} {st.last_name}")
            students.append(st)
    return students


def check_tables_exist(db: Session) -> bool:
    """Check if all required tables exist in the database."""
    names = set(inspect(db.get_bind()).get_table_names())
    return {"teacher", "student"} <= names


def main():
    print("[Seed] Seeding database...")
    with SessionLocal() as db:
        if not check_tables_exist(db):
            print("[Seed] Error: tables not found. Run `alembic upgrade head` first.")
            return

        teachers = ensure_teachers(db)
        students = ensure_students(db, teachers)

        print("\n[Seed] Done!")
        print("-------------------------------------------------")
        print(f"Teachers: {len(teachers)}  Students: {len(students)}")
        print("-------------------------------------------------")


if __name__ == "__main__":
    main()
