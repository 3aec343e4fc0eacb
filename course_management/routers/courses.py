from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from course_management.core.deps import get_db
from course_management.core.responses import unwrap
from course_management.schemas.course import (
    AvailableCourse,
    CourseAvailabilityUpdate,
    CourseCreate,
    CourseRead,
    CourseTeacherAssign,
)
from course_management.schemas.result import Confirmation, CourseResult, ErrorResponse
from course_management.services import courses as course_service

router = APIRouter()

ADMIN_ERRORS = {
    400: {"model": ErrorResponse, "description": "Malformed input"},
    403: {"model": ErrorResponse, "description": "Actor is not an admin"},
    404: {"model": ErrorResponse, "description": "Actor, course or teacher not found"},
}


@router.get("", response_model=list[AvailableCourse])
def list_available_courses(db: Session = Depends(get_db)):
    return unwrap(course_service.list_available_courses(db))


@router.post(
    "",
    response_model=CourseResult,
    status_code=status.HTTP_201_CREATED,
    responses={**ADMIN_ERRORS, 409: {"model": ErrorResponse, "description": "Title already in use"}},
)
def create_course(payload: CourseCreate, db: Session = Depends(get_db)):
    outcome = course_service.create_course(
        db,
        actor_id=payload.actor_id,
        title=payload.title,
        teacher_id=payload.teacher_id,
        is_available=payload.is_available,
    )
    course = unwrap(outcome)
    return CourseResult(success=outcome.message, course=CourseRead.model_validate(course))


@router.delete(
    "/{course_id}",
    response_model=Confirmation,
    responses={**ADMIN_ERRORS, 409: {"model": ErrorResponse, "description": "Course has enrolments"}},
)
def delete_course(course_id: int, actor_id: int, db: Session = Depends(get_db)):
    outcome = course_service.delete_course(db, actor_id=actor_id, course_id=course_id)
    unwrap(outcome)
    return Confirmation(success=outcome.message)


@router.patch("/{course_id}/availability", response_model=CourseResult, responses=ADMIN_ERRORS)
def set_course_availability(
    course_id: int,
    payload: CourseAvailabilityUpdate,
    db: Session = Depends(get_db),
):
    outcome = course_service.set_course_availability(
        db,
        actor_id=payload.actor_id,
        course_id=course_id,
        is_available=payload.is_available,
    )
    course = unwrap(outcome)
    return CourseResult(success=outcome.message, course=CourseRead.model_validate(course))


@router.patch("/{course_id}/teacher", response_model=CourseResult, responses=ADMIN_ERRORS)
def assign_teacher(
    course_id: int,
    payload: CourseTeacherAssign,
    db: Session = Depends(get_db),
):
    outcome = course_service.assign_teacher(
        db,
        actor_id=payload.actor_id,
        course_id=course_id,
        teacher_id=payload.teacher_id,
    )
    course = unwrap(outcome)
    return CourseResult(success=outcome.message, course=CourseRead.model_validate(course))
