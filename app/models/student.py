from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base

if TYPE_CHECKING:
    from app.models.teacher import Teacher


class Student(Base):
    __tablename__ = "student"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Business identifier; NULLs do not collide under a UNIQUE constraint.
    student_id: Mapped[str | None] = mapped_column(String(50), unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), unique=True, index=True, nullable=False
    )
    phone_number: Mapped[str | None] = mapped_column(String(30))
    enrollment_date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    grade_level: Mapped[str | None] = mapped_column(String(20), index=True)

    teacher_id: Mapped[int | None] = mapped_column(
        ForeignKey("teacher.id", ondelete="SET NULL"), index=True, nullable=True
    )
    teacher: Mapped[Teacher | None] = relationship("Teacher")

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, email={self.email!r})"
