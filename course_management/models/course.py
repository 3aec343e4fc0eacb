from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.db.base_class import Base


class Course(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # NULL means "to be decided"
    teacher_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (UniqueConstraint("title", name="uq_courses_title"),)

    teacher = relationship("User", back_populates="taught_courses")

    # the database refuses to delete a course that still has enrolments
    enrolments = relationship(
        "Enrolment", back_populates="course", passive_deletes="all"
    )
