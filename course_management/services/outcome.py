import functools
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Mapping

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from course_management.core.errors import CommandError, Conflict, OutcomeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str
    payload: Any = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK


def command(success_message: str) -> Callable[[Callable[..., Any]], Callable[..., Outcome]]:
    """
    Command boundary.

    The wrapped function runs the pipeline and returns the success payload, or
    raises a CommandError. Either way the caller gets an Outcome:
    - CommandError -> its own kind and message
    - anything else (storage or not) -> INTERNAL
    The session is rolled back on every failure path.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Outcome]:
        name = fn.__name__

        @functools.wraps(fn)
        def wrapper(db: Session, *args, **kwargs) -> Outcome:
            try:
                payload = fn(db, *args, **kwargs)
            except CommandError as exc:
                db.rollback()
                logger.info("%s rejected: %s (%s)", name, exc.kind.value, exc.message)
                return Outcome(kind=exc.kind, message=exc.message)
            except SQLAlchemyError:
                db.rollback()
                logger.exception("%s failed in storage", name)
                return Outcome(kind=OutcomeKind.INTERNAL, message="Internal server error")
            except Exception:
                db.rollback()
                logger.exception("%s failed unexpectedly", name)
                return Outcome(kind=OutcomeKind.INTERNAL, message="Internal server error")

            logger.info("%s ok", name)
            return Outcome(kind=OutcomeKind.OK, message=success_message, payload=payload)

        return wrapper

    return decorator


# How each translatable constraint shows up in a driver error: its name
# (PostgreSQL and friends) or SQLite's message, which never names it.
CONSTRAINT_SIGNATURES = {
    "uq_courses_title": ("uq_courses_title", "UNIQUE constraint failed: courses.title"),
    "uq_enrolments_course_student": (
        "uq_enrolments_course_student",
        "UNIQUE constraint failed: enrolments.course_id, enrolments.student_id",
    ),
    "fk_enrolments_course_id": ("fk_enrolments_course_id", "FOREIGN KEY constraint failed"),
}


def violated_constraint(exc: IntegrityError, candidates: Iterable[str]) -> str | None:
    """Return the first candidate constraint the driver error points at, if any."""
    diag = getattr(exc.orig, "diag", None)
    reported = getattr(diag, "constraint_name", None)
    message = str(exc.orig)
    for name in candidates:
        if reported is not None:
            if reported == name:
                return name
            continue
        if any(sig in message for sig in CONSTRAINT_SIGNATURES.get(name, (name,))):
            return name
    return None


@contextmanager
def atomic(db: Session, conflicts: Mapping[str, str] | None = None) -> Iterator[Session]:
    """
    Run checks and mutation in one transaction, committing only if all pass.

    ``conflicts`` maps constraint names to the Conflict message the matching
    pre-check raises; a concurrent write that slips past the pre-check and
    trips one of them surfaces as that same Conflict. Any other integrity
    error is re-raised and ends up INTERNAL at the command boundary.
    """
    conflicts = conflicts or {}
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        name = violated_constraint(exc, conflicts)
        if name is None:
            raise
        logger.warning("constraint violation on %s: %s", name, exc.orig)
        raise Conflict(conflicts[name]) from exc
    except Exception:
        db.rollback()
        raise
