from datetime import datetime

from pydantic import BaseModel

from course_management.models.enrolment import Mark


class EnrolmentCreate(BaseModel):
    student_id: int
    course_id: int


class MarkUpdate(BaseModel):
    actor_id: int
    course_id: int
    student_id: int
    mark: Mark


class EnrolmentRead(BaseModel):
    id: int
    course_id: int
    student_id: int
    mark: Mark | None = None
    created_at: datetime
    marked_at: datetime | None = None

    class Config:
        from_attributes = True
