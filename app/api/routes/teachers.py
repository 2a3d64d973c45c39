# app/api/routes/teachers.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.common import MessageOut
from app.schemas.teachers import TeacherIn, TeacherOut, TeacherWithStudentsOut
from app.services import teacher_service

router = APIRouter(prefix="/teacher", tags=["teachers"])


def _out(rows) -> list[TeacherOut]:
    return [TeacherOut.model_validate(t) for t in rows]


def _with_students(rows) -> list[TeacherWithStudentsOut]:
    return [TeacherWithStudentsOut.model_validate(t) for t in rows]


@router.post("", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
def create_teacher(payload: TeacherIn, db: Session = Depends(get_db)):
    teacher = teacher_service.create_teacher(db, payload)
    return TeacherOut.model_validate(teacher)


@router.get("", response_model=list[TeacherOut])
def list_teachers(db: Session = Depends(get_db)):
    return _out(teacher_service.get_all_teachers(db))


@router.get("/with-students", response_model=list[TeacherWithStudentsOut])
def list_teachers_with_students(db: Session = Depends(get_db)):
    return _with_students(teacher_service.get_all_teachers_with_students(db))


@router.get("/search", response_model=list[TeacherOut])
def search_teachers(
    name: str = Query(..., description="Substring of first or last name"),
    db: Session = Depends(get_db),
):
    return _out(teacher_service.search_teachers_by_name(db, name))


@router.get("/by-name", response_model=list[TeacherOut])
def list_teachers_by_full_name(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    db: Session = Depends(get_db),
):
    return _out(teacher_service.get_teachers_by_full_name(db, first_name, last_name))


@router.get("/email/{email}", response_model=TeacherOut)
def get_teacher_by_email(email: str, db: Session = Depends(get_db)):
    teacher = teacher_service.get_teacher_by_email(db, email)
    if not teacher:
        raise HTTPException(404, f"Teacher not found with email: {email}")
    return TeacherOut.model_validate(teacher)


@router.get("/email/{email}/exists", response_model=bool)
def teacher_email_exists(email: str, db: Session = Depends(get_db)):
    return teacher_service.exists_by_email(db, email)


@router.get("/department/{department}", response_model=list[TeacherOut])
def list_teachers_by_department(department: str, db: Session = Depends(get_db)):
    return _out(teacher_service.get_teachers_by_department(db, department))


@router.get(
    "/department/{department}/with-students",
    response_model=list[TeacherWithStudentsOut],
)
def list_department_with_students(department: str, db: Session = Depends(get_db)):
    rows = teacher_service.get_teachers_by_department_with_students(db, department)
    return _with_students(rows)


@router.get("/department/{department}/count", response_model=int)
def count_teachers_by_department(department: str, db: Session = Depends(get_db)):
    return teacher_service.count_by_department(db, department)


@router.get("/subject/{subject}", response_model=list[TeacherOut])
def list_teachers_by_subject(subject: str, db: Session = Depends(get_db)):
    return _out(teacher_service.get_teachers_by_subject(db, subject))


@router.get("/{teacher_pk}", response_model=TeacherOut)
def get_teacher(teacher_pk: int, db: Session = Depends(get_db)):
    teacher = teacher_service.get_teacher_by_id(db, teacher_pk)
    if not teacher:
        raise HTTPException(404, f"Teacher not found with id: {teacher_pk}")
    return TeacherOut.model_validate(teacher)


@router.get("/{teacher_pk}/exists", response_model=bool)
def teacher_exists(teacher_pk: int, db: Session = Depends(get_db)):
    return teacher_service.exists_by_id(db, teacher_pk)


@router.put("/{teacher_pk}", response_model=TeacherOut)
def update_teacher(
    teacher_pk: int, payload: TeacherIn, db: Session = Depends(get_db)
):
    teacher = teacher_service.update_teacher(db, teacher_pk, payload)
    return TeacherOut.model_validate(teacher)


@router.delete("/{teacher_pk}", response_model=MessageOut)
def delete_teacher(teacher_pk: int, db: Session = Depends(get_db)):
    teacher_service.delete_teacher(db, teacher_pk)
    return MessageOut(message="Teacher deleted successfully")
