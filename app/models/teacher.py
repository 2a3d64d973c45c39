from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base

if TYPE_CHECKING:
    from app.models.student import Student


class Teacher(Base):
    __tablename__ = "teacher"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), unique=True, index=True, nullable=False
    )
    phone_number: Mapped[str | None] = mapped_column(String(30))
    subject: Mapped[str | None] = mapped_column(String(120), index=True)
    department: Mapped[str | None] = mapped_column(String(120), index=True)

    # Read-only view of student.teacher_id; links are written on Student only.
    students: Mapped[list[Student]] = relationship(
        "Student", viewonly=True, lazy="select"
    )

    def __repr__(self) -> str:
        return f"Teacher(id={self.id!r}, email={self.email!r})"
