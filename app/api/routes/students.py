# app/api/routes/students.py
import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.common import MessageOut
from app.schemas.students import StudentIn, StudentOut, StudentWithTeacherOut
from app.services import student_service

router = APIRouter(prefix="/student", tags=["students"])


def _out(rows) -> list[StudentOut]:
    return [StudentOut.model_validate(s) for s in rows]


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentIn, db: Session = Depends(get_db)):
    st = student_service.create_student(db, payload)
    return StudentOut.model_validate(st)


@router.get("", response_model=list[StudentOut])
def list_students(db: Session = Depends(get_db)):
    return _out(student_service.get_all_students(db))


# Static paths first: "/{student_pk}" would otherwise swallow them.
@router.get("/with-teacher", response_model=list[StudentWithTeacherOut])
def list_students_with_teacher(db: Session = Depends(get_db)):
    rows = student_service.get_all_students_with_teacher(db)
    return [StudentWithTeacherOut.model_validate(s) for s in rows]


@router.get("/without-teacher", response_model=list[StudentOut])
def list_students_without_teacher(db: Session = Depends(get_db)):
    return _out(student_service.get_students_without_teacher(db))


@router.get("/search", response_model=list[StudentOut])
def search_students(
    name: str = Query(..., description="Substring of first or last name"),
    db: Session = Depends(get_db),
):
    return _out(student_service.search_students_by_name(db, name))


@router.get("/by-name", response_model=list[StudentOut])
def list_students_by_full_name(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    db: Session = Depends(get_db),
):
    return _out(student_service.get_students_by_full_name(db, first_name, last_name))


@router.get("/enrolled-between", response_model=list[StudentOut])
def list_students_enrolled_between(
    start_date: dt.date = Query(..., alias="startDate"),
    end_date: dt.date = Query(..., alias="endDate"),
    db: Session = Depends(get_db),
):
    return _out(student_service.get_students_enrolled_between(db, start_date, end_date))


@router.get("/enrolled-after", response_model=list[StudentOut])
def list_students_enrolled_after(
    date: dt.date = Query(..., description="Exclusive lower bound (ISO date)"),
    db: Session = Depends(get_db),
):
    return _out(student_service.get_students_enrolled_after(db, date))


@router.get("/email/{email}", response_model=StudentOut)
def get_student_by_email(email: str, db: Session = Depends(get_db)):
    st = student_service.get_student_by_email(db, email)
    if not st:
        raise HTTPException(404, f"Student not found with email: {email}")
    return StudentOut.model_validate(st)


@router.get("/email/{email}/exists", response_model=bool)
def student_email_exists(email: str, db: Session = Depends(get_db)):
    return student_service.exists_by_email(db, email)


@router.get("/student-id/{student_id}", response_model=StudentOut)
def get_student_by_student_id(student_id: str, db: Session = Depends(get_db)):
    st = student_service.get_student_by_student_id(db, student_id)
    if not st:
        raise HTTPException(404, f"Student not found with student ID: {student_id}")
    return StudentOut.model_validate(st)


@router.get("/student-id/{student_id}/exists", response_model=bool)
def student_id_exists(student_id: str, db: Session = Depends(get_db)):
    return student_service.exists_by_student_id(db, student_id)


@router.get("/grade/{grade_level}", response_model=list[StudentOut])
def list_students_by_grade(grade_level: str, db: Session = Depends(get_db)):
    return _out(student_service.get_students_by_grade_level(db, grade_level))


@router.get("/grade/{grade_level}/count", response_model=int)
def count_students_by_grade(grade_level: str, db: Session = Depends(get_db)):
    return student_service.count_by_grade_level(db, grade_level)


@router.get("/teacher/{teacher_pk}", response_model=list[StudentOut])
def list_students_by_teacher(teacher_pk: int, db: Session = Depends(get_db)):
    return _out(student_service.get_students_by_teacher_id(db, teacher_pk))


@router.get("/teacher/{teacher_pk}/count", response_model=int)
def count_students_by_teacher(teacher_pk: int, db: Session = Depends(get_db)):
    return student_service.count_by_teacher(db, teacher_pk)


@router.get("/teacher-subject/{subject}", response_model=list[StudentOut])
def list_students_by_teacher_subject(subject: str, db: Session = Depends(get_db)):
    return _out(student_service.get_students_by_teacher_subject(db, subject))


@router.get("/{student_pk}", response_model=StudentOut)
def get_student(student_pk: int, db: Session = Depends(get_db)):
    st = student_service.get_student_by_id(db, student_pk)
    if not st:
        raise HTTPException(404, f"Student not found with id: {student_pk}")
    return StudentOut.model_validate(st)


@router.get("/{student_pk}/exists", response_model=bool)
def student_exists(student_pk: int, db: Session = Depends(get_db)):
    return student_service.exists_by_id(db, student_pk)


@router.put("/{student_pk}", response_model=StudentOut)
def update_student(
    student_pk: int, payload: StudentIn, db: Session = Depends(get_db)
):
    st = student_service.update_student(db, student_pk, payload)
    return StudentOut.model_validate(st)


@router.put("/{student_pk}/assign-teacher/{teacher_pk}", response_model=StudentOut)
def assign_teacher(student_pk: int, teacher_pk: int, db: Session = Depends(get_db)):
    st = student_service.assign_teacher_to_student(db, student_pk, teacher_pk)
    return StudentOut.model_validate(st)


@router.put("/{student_pk}/remove-teacher", response_model=StudentOut)
def remove_teacher(student_pk: int, db: Session = Depends(get_db)):
    st = student_service.remove_teacher_from_student(db, student_pk)
    return StudentOut.model_validate(st)


@router.delete("/{student_pk}", response_model=MessageOut)
def delete_student(student_pk: int, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_pk)
    return MessageOut(message="Student deleted successfully")
