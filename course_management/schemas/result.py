from pydantic import BaseModel

from course_management.schemas.course import CourseRead
from course_management.schemas.enrolment import EnrolmentRead


class Confirmation(BaseModel):
    success: str


class CourseResult(Confirmation):
    course: CourseRead


class EnrolmentResult(Confirmation):
    enrolment: EnrolmentRead


class ErrorDetail(BaseModel):
    kind: str
    message: str


class ErrorResponse(BaseModel):
    detail: ErrorDetail
