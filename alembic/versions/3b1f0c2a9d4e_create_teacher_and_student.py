"""create teacher and student

Revision ID: 3b1f0c2a9d4e
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3b1f0c2a9d4e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "teacher",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("subject", sa.String(length=120), nullable=True),
        sa.Column("department", sa.String(length=120), nullable=True),
    )
    op.create_index("ix_teacher_email", "teacher", ["email"], unique=True)
    op.create_index("ix_teacher_subject", "teacher", ["subject"])
    op.create_index("ix_teacher_department", "teacher", ["department"])

    op.create_table(
        "student",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("student_id", sa.String(length=50), nullable=True),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("enrollment_date", sa.Date(), nullable=False),
        sa.Column("grade_level", sa.String(length=20), nullable=True),
        sa.Column(
            "teacher_id",
            sa.Integer(),
            sa.ForeignKey("teacher.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("ix_student_email", "student", ["email"], unique=True)
    # UNIQUE ignores NULLs, so students without a business id never collide
    op.create_index("ix_student_student_id", "student", ["student_id"], unique=True)
    op.create_index("ix_student_enrollment_date", "student", ["enrollment_date"])
    op.create_index("ix_student_grade_level", "student", ["grade_level"])
    op.create_index("ix_student_teacher_id", "student", ["teacher_id"])


def downgrade() -> None:
    op.drop_index("ix_student_teacher_id", table_name="student")
    op.drop_index("ix_student_grade_level", table_name="student")
    op.drop_index("ix_student_enrollment_date", table_name="student")
    op.drop_index("ix_student_student_id", table_name="student")
    op.drop_index("ix_student_email", table_name="student")
    op.drop_table("student")

    op.drop_index("ix_teacher_department", table_name="teacher")
    op.drop_index("ix_teacher_subject", table_name="teacher")
    op.drop_index("ix_teacher_email", table_name="teacher")
    op.drop_table("teacher")
