from pydantic import BaseModel, Field, StrictBool


class CourseCreate(BaseModel):
    actor_id: int
    title: str = Field(min_length=1, max_length=255)
    teacher_id: int | None = None
    is_available: StrictBool | None = None


class CourseAvailabilityUpdate(BaseModel):
    actor_id: int
    is_available: StrictBool


class CourseTeacherAssign(BaseModel):
    actor_id: int
    teacher_id: int


class CourseRead(BaseModel):
    id: int
    title: str
    teacher_id: int | None = None
    is_available: bool

    class Config:
        from_attributes = True


class AvailableCourse(BaseModel):
    course_id: int
    title: str
    teacher_name: str
