from sqlalchemy.orm import Session

from course_management.db.base import Base
from course_management.db.session import engine
from course_management.models.user import Role, User


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def seed_users(db: Session, users: list[tuple[str, Role]]) -> list[User]:
    """Insert pre-seeded users given as (name, role) pairs.

    Users are created outside the command layer; this is only for local
    development and tests.
    """
    rows = [User(name=name, role=role) for name, role in users]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows
