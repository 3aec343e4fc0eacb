import enum


class OutcomeKind(str, enum.Enum):
    OK = "ok"
    BAD_INPUT = "bad_input"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class CommandError(Exception):
    """Base for every rejection a command can produce.

    Raised inside a command's pipeline and turned into an ``Outcome`` at the
    command boundary; it never reaches the HTTP layer as an exception.
    """

    kind = OutcomeKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadInput(CommandError):
    kind = OutcomeKind.BAD_INPUT


class NotFound(CommandError):
    kind = OutcomeKind.NOT_FOUND


class Forbidden(CommandError):
    kind = OutcomeKind.FORBIDDEN


class Conflict(CommandError):
    kind = OutcomeKind.CONFLICT
