from typing import Any

from course_management.core.errors import BadInput
from course_management.models.enrolment import Mark


def require_id(value: Any, field: str) -> int:
    if value is None:
        raise BadInput(f"{field} is required")
    # bool is an int subclass; True is not a user id
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadInput(f"{field} must be an integer")
    return value


def optional_id(value: Any, field: str) -> int | None:
    if value is None:
        return None
    return require_id(value, field)


def require_bool(value: Any, field: str) -> bool:
    if value is None:
        raise BadInput(f"{field} is required")
    if not isinstance(value, bool):
        raise BadInput(f"{field} must be true or false")
    return value


def require_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BadInput("title is required")
    title = value.strip()
    if len(title) > 255:
        raise BadInput("title must be at most 255 characters")
    return title


def require_mark(value: Any) -> Mark:
    # absent is the pre-grading state only, never something a teacher can set
    try:
        return Mark(value)
    except ValueError:
        raise BadInput("mark must be 'pass' or 'fail'") from None
