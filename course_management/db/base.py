# import models so Base.metadata knows every table
from course_management.db.base_class import Base  # noqa: F401
from course_management.models import course, enrolment, user  # noqa: F401
