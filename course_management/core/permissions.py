from sqlalchemy.orm import Session

from course_management.core.errors import Forbidden, NotFound
from course_management.models.user import Role, User


def authorize(db: Session, actor_id: int, required_role: Role) -> bool:
    """Fail-closed role check: False for unknown actors and for any other role."""
    actor = db.get(User, actor_id)
    return actor is not None and actor.role is required_role


def require_role(db: Session, actor_id: int, required_role: Role) -> User:
    # unknown actor is reported before a role mismatch
    actor = db.get(User, actor_id)
    if actor is None:
        raise NotFound("Actor not found")
    if actor.role is not required_role:
        raise Forbidden("You are not authorized to perform this action")
    return actor
