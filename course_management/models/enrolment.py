import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import relationship

from course_management.db.base_class import Base


class Mark(str, enum.Enum):
    PASS = "pass"
    FAIL = "fail"


class Enrolment(Base):
    __tablename__ = "enrolments"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(
        Integer,
        ForeignKey("courses.id", ondelete="RESTRICT", name="fk_enrolments_course_id"),
        nullable=False,
        index=True,
    )
    student_id = Column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # NULL until a teacher grades the enrolment
    mark = Column(
        Enum(
            Mark,
            name="enrolment_mark",
            native_enum=False,
            length=10,
            values_callable=lambda marks: [m.value for m in marks],
            validate_strings=True,
        ),
        nullable=True,
    )

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    marked_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "course_id", "student_id", name="uq_enrolments_course_student"
        ),
    )

    course = relationship("Course", back_populates="enrolments")
    student = relationship("User", back_populates="enrolments")
