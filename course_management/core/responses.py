from typing import Any

from fastapi import HTTPException, status

from course_management.core.errors import OutcomeKind
from course_management.services.outcome import Outcome

STATUS_BY_KIND = {
    OutcomeKind.BAD_INPUT: status.HTTP_400_BAD_REQUEST,
    OutcomeKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OutcomeKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    OutcomeKind.CONFLICT: status.HTTP_409_CONFLICT,
    OutcomeKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap(outcome: Outcome) -> Any:
    """Return the payload of a successful outcome, raise HTTPException otherwise."""
    if outcome.ok:
        return outcome.payload
    raise HTTPException(
        status_code=STATUS_BY_KIND[outcome.kind],
        detail={"kind": outcome.kind.value, "message": outcome.message},
    )
