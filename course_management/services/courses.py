"""Admin commands over courses, plus the public listing of available courses.

Every mutating command follows the same shape: validate input, authorize the
actor as admin, run its existence/state checks, then mutate, all inside one
``atomic`` block so the checks and the write commit together.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from course_management.core.config import TBD_TEACHER_NAME
from course_management.core.errors import Conflict, Forbidden, NotFound
from course_management.core.permissions import require_role
from course_management.models.course import Course
from course_management.models.enrolment import Enrolment
from course_management.models.user import Role, User
from course_management.services.inputs import (
    optional_id,
    require_bool,
    require_id,
    require_title,
)
from course_management.services.outcome import atomic, command

logger = logging.getLogger(__name__)

TITLE_IN_USE = "Course title already in use"
COURSE_HAS_ENROLMENTS = "Course has enrolments and cannot be deleted"


def _ensure_course_exists(db: Session, course_id: int, *, for_update: bool = False) -> Course:
    stmt = select(Course).where(Course.id == course_id)
    if for_update:
        stmt = stmt.with_for_update()
    course = db.scalars(stmt).first()
    if course is None:
        raise NotFound("Course not found")
    return course


def _title_taken(db: Session, title: str) -> bool:
    return db.scalars(select(Course.id).where(Course.title == title)).first() is not None


def _has_enrolments(db: Session, course_id: int) -> bool:
    return (
        db.scalars(select(Enrolment.id).where(Enrolment.course_id == course_id)).first()
        is not None
    )


def _ensure_teacher(db: Session, teacher_id: int) -> User:
    teacher = db.get(User, teacher_id)
    if teacher is None:
        raise NotFound("Teacher not found")
    if teacher.role is not Role.TEACHER:
        raise Forbidden(f"User {teacher_id} is not a teacher")
    return teacher


@command("Course availability updated")
def set_course_availability(db: Session, actor_id, course_id, is_available) -> Course:
    actor_id = require_id(actor_id, "actor_id")
    course_id = require_id(course_id, "course_id")
    is_available = require_bool(is_available, "is_available")

    with atomic(db):
        require_role(db, actor_id, Role.ADMIN)
        course = _ensure_course_exists(db, course_id)
        # same value again is still a success
        course.is_available = is_available

    logger.info("course %s availability=%s by admin %s", course_id, is_available, actor_id)
    return course


@command("Course created successfully")
def create_course(db: Session, actor_id, title, teacher_id=None, is_available=None) -> Course:
    actor_id = require_id(actor_id, "actor_id")
    title = require_title(title)
    teacher_id = optional_id(teacher_id, "teacher_id")
    is_available = False if is_available is None else require_bool(is_available, "is_available")

    # the unique constraint on title backs the pre-check below
    with atomic(db, conflicts={"uq_courses_title": TITLE_IN_USE}):
        require_role(db, actor_id, Role.ADMIN)

        # not-found and forbidden outrank conflict
        if teacher_id is not None:
            _ensure_teacher(db, teacher_id)

        if _title_taken(db, title):
            raise Conflict(TITLE_IN_USE)

        course = Course(title=title, teacher_id=teacher_id, is_available=is_available)
        db.add(course)
        db.flush()

    logger.info("course %s (%r) created by admin %s", course.id, title, actor_id)
    return course


@command("Course deleted successfully")
def delete_course(db: Session, actor_id, course_id) -> dict:
    actor_id = require_id(actor_id, "actor_id")
    course_id = require_id(course_id, "course_id")

    # the RESTRICT foreign key on enrolments backs the pre-check below
    with atomic(db, conflicts={"fk_enrolments_course_id": COURSE_HAS_ENROLMENTS}):
        require_role(db, actor_id, Role.ADMIN)
        _ensure_course_exists(db, course_id, for_update=True)

        if _has_enrolments(db, course_id):
            raise Conflict(COURSE_HAS_ENROLMENTS)

        db.execute(delete(Course).where(Course.id == course_id))

    logger.info("course %s deleted by admin %s", course_id, actor_id)
    return {"course_id": course_id}


@command("Teacher assigned to course")
def assign_teacher(db: Session, actor_id, course_id, teacher_id) -> Course:
    actor_id = require_id(actor_id, "actor_id")
    course_id = require_id(course_id, "course_id")
    teacher_id = require_id(teacher_id, "teacher_id")

    with atomic(db):
        require_role(db, actor_id, Role.ADMIN)
        course = _ensure_course_exists(db, course_id)
        _ensure_teacher(db, teacher_id)
        # last write wins against a concurrent assignment
        course.teacher_id = teacher_id

    logger.info("teacher %s assigned to course %s by admin %s", teacher_id, course_id, actor_id)
    return course


@command("Available courses")
def list_available_courses(db: Session) -> list[dict]:
    rows = db.execute(
        select(Course.id, Course.title, User.name.label("teacher_name"))
        .select_from(Course)
        .outerjoin(User, User.id == Course.teacher_id)
        .where(Course.is_available.is_(True))
        .order_by(Course.title.asc())
    ).all()

    return [
        {
            "course_id": r.id,
            "title": r.title,
            "teacher_name": r.teacher_name if r.teacher_name is not None else TBD_TEACHER_NAME,
        }
        for r in rows
    ]
