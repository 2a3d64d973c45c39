import datetime as dt

from pydantic import constr

from app.schemas.common import CamelModel, Email

Name = constr(strip_whitespace=True, min_length=2, max_length=50)


class StudentIn(CamelModel):
    student_id: constr(strip_whitespace=True, min_length=1, max_length=50) | None = None
    first_name: Name
    last_name: Name
    email: Email
    phone_number: constr(max_length=30) | None = None
    enrollment_date: dt.date | None = None
    grade_level: constr(max_length=20) | None = None


class StudentOut(CamelModel):
    id: int
    student_id: str | None = None
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    enrollment_date: dt.date
    grade_level: str | None = None
    teacher_id: int | None = None


class TeacherSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    subject: str | None = None
    department: str | None = None


class StudentWithTeacherOut(StudentOut):
    teacher: TeacherSummary | None = None
