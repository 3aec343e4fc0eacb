from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from course_management.core.deps import get_db
from course_management.core.responses import unwrap
from course_management.schemas.enrolment import EnrolmentCreate, EnrolmentRead, MarkUpdate
from course_management.schemas.result import EnrolmentResult, ErrorResponse
from course_management.services import enrolments as enrolment_service

router = APIRouter()


@router.post(
    "",
    response_model=EnrolmentResult,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {"model": ErrorResponse, "description": "Not a student, or course unavailable"},
        404: {"model": ErrorResponse, "description": "Student or course not found"},
        409: {"model": ErrorResponse, "description": "Already enrolled"},
    },
)
def enrol_self(payload: EnrolmentCreate, db: Session = Depends(get_db)):
    outcome = enrolment_service.enrol_self(
        db, student_id=payload.student_id, course_id=payload.course_id
    )
    enrolment = unwrap(outcome)
    return EnrolmentResult(
        success=outcome.message, enrolment=EnrolmentRead.model_validate(enrolment)
    )


@router.patch(
    "/mark",
    response_model=EnrolmentResult,
    responses={
        403: {"model": ErrorResponse, "description": "Not the assigned teacher"},
        404: {"model": ErrorResponse, "description": "Teacher, course or enrolment not found"},
    },
)
def set_mark(payload: MarkUpdate, db: Session = Depends(get_db)):
    outcome = enrolment_service.set_mark(
        db,
        actor_id=payload.actor_id,
        course_id=payload.course_id,
        student_id=payload.student_id,
        mark=payload.mark,
    )
    enrolment = unwrap(outcome)
    return EnrolmentResult(
        success=outcome.message, enrolment=EnrolmentRead.model_validate(enrolment)
    )
