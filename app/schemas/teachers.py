from pydantic import constr

from app.schemas.common import CamelModel, Email
from app.schemas.students import StudentOut

Name = constr(strip_whitespace=True, min_length=2, max_length=50)


class TeacherIn(CamelModel):
    first_name: Name
    last_name: Name
    email: Email
    phone_number: constr(max_length=30) | None = None
    subject: constr(max_length=120) | None = None
    department: constr(max_length=120) | None = None


class TeacherOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    subject: str | None = None
    department: str | None = None


class TeacherWithStudentsOut(TeacherOut):
    students: list[StudentOut] = []
