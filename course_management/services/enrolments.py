import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from course_management.core.errors import Conflict, Forbidden, NotFound
from course_management.core.permissions import require_role
from course_management.models.course import Course
from course_management.models.enrolment import Enrolment
from course_management.models.user import Role
from course_management.services.inputs import require_id, require_mark
from course_management.services.outcome import atomic, command

logger = logging.getLogger(__name__)

ALREADY_ENROLLED = "Student is already enrolled in this course"


def _find_enrolment(db: Session, course_id: int, student_id: int) -> Enrolment | None:
    return db.scalars(
        select(Enrolment).where(
            Enrolment.course_id == course_id,
            Enrolment.student_id == student_id,
        )
    ).first()


@command("Student enrolled in course")
def enrol_self(db: Session, student_id, course_id) -> Enrolment:
    # the caller is both the actor and the enrolled student
    student_id = require_id(student_id, "student_id")
    course_id = require_id(course_id, "course_id")

    # uq_enrolments_course_student backs the duplicate check below
    with atomic(db, conflicts={"uq_enrolments_course_student": ALREADY_ENROLLED}):
        require_role(db, student_id, Role.STUDENT)

        course = db.get(Course, course_id)
        if course is None:
            raise NotFound("Course not found")
        if not course.is_available:
            raise Forbidden("Course is not available for enrolment")

        if _find_enrolment(db, course_id, student_id) is not None:
            raise Conflict(ALREADY_ENROLLED)

        enrolment = Enrolment(course_id=course_id, student_id=student_id, mark=None)
        db.add(enrolment)
        db.flush()
        db.refresh(enrolment)

    logger.info("student %s enrolled in course %s", student_id, course_id)
    return enrolment


@command("Student mark updated")
def set_mark(db: Session, actor_id, course_id, student_id, mark) -> Enrolment:
    actor_id = require_id(actor_id, "actor_id")
    course_id = require_id(course_id, "course_id")
    student_id = require_id(student_id, "student_id")
    mark = require_mark(mark)

    with atomic(db):
        require_role(db, actor_id, Role.TEACHER)

        course = db.get(Course, course_id)
        if course is None:
            raise NotFound("Course not found")
        # ownership: only the currently assigned teacher grades this course
        if course.teacher_id != actor_id:
            raise Forbidden("Not the assigned teacher of this course")

        enrolment = _find_enrolment(db, course_id, student_id)
        if enrolment is None:
            raise NotFound("Enrolment not found")

        enrolment.mark = mark
        enrolment.marked_at = datetime.now(timezone.utc)

    logger.info(
        "teacher %s set mark=%s for student %s in course %s",
        actor_id,
        mark.value,
        student_id,
        course_id,
    )
    return enrolment
