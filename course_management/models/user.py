import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db.base_class import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # stored by value; an unrecognised value fails on load instead of matching nothing
    role: Mapped[Role] = mapped_column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
            validate_strings=True,
        ),
        nullable=False,
    )

    taught_courses = relationship("Course", back_populates="teacher")
    enrolments = relationship("Enrolment", back_populates="student")
