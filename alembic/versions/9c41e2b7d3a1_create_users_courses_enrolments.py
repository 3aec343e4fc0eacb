"""create users courses enrolments

Revision ID: 9c41e2b7d3a1
Revises:
Create Date: 2026-10-18 10:12:41.207314

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9c41e2b7d3a1'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.CheckConstraint("role IN ('admin', 'teacher', 'student')", name="ck_users_role"),
    )
    op.create_index("ix_users_id", "users", ["id"])

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column(
            "teacher_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="RESTRICT"),
            nullable=True,
        ),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("title", name="uq_courses_title"),
    )
    op.create_index("ix_courses_id", "courses", ["id"])
    op.create_index("ix_courses_teacher_id", "courses", ["teacher_id"])

    op.create_table(
        "enrolments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "course_id",
            sa.Integer(),
            sa.ForeignKey("courses.id", ondelete="RESTRICT", name="fk_enrolments_course_id"),
            nullable=False,
        ),
        sa.Column(
            "student_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("mark", sa.String(length=10), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("marked_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("course_id", "student_id", name="uq_enrolments_course_student"),
        sa.CheckConstraint("mark IN ('pass', 'fail')", name="ck_enrolments_mark"),
    )
    op.create_index("ix_enrolments_id", "enrolments", ["id"])
    op.create_index("ix_enrolments_course_id", "enrolments", ["course_id"])
    op.create_index("ix_enrolments_student_id", "enrolments", ["student_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("enrolments")
    op.drop_table("courses")
    op.drop_table("users")
