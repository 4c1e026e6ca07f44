from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_CONFLICT = "duplicate_conflict"
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


class ExpenseAPIError(Exception):
    """Base class for errors that map onto an HTTP status and a safe message."""

    kind = ErrorKind.INTERNAL


class NotFoundError(ExpenseAPIError):
    kind = ErrorKind.NOT_FOUND


class DuplicateConflictError(ExpenseAPIError):
    kind = ErrorKind.DUPLICATE_CONFLICT


class InvalidInputError(ExpenseAPIError):
    kind = ErrorKind.INVALID_INPUT


# reserved, nothing raises these yet
class UnauthorizedError(ExpenseAPIError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ExpenseAPIError):
    kind = ErrorKind.FORBIDDEN


class InternalError(ExpenseAPIError):
    kind = ErrorKind.INTERNAL


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_CONFLICT: 409,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
}

_MESSAGES = {
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.DUPLICATE_CONFLICT: "Duplicate resource",
    ErrorKind.INVALID_INPUT: "Invalid input",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
}

INTERNAL_STATUS_CODE = 500
INTERNAL_MESSAGE = "Internal server error"


def _kind_of(error: BaseException | ErrorKind | None) -> ErrorKind:
    if isinstance(error, ErrorKind):
        return error
    if isinstance(error, ExpenseAPIError):
        return error.kind
    return ErrorKind.INTERNAL


def status_for(error: BaseException | ErrorKind | None) -> int:
    """Return the HTTP status code for an error or error kind. Unknown errors map to 500."""
    return _STATUS_CODES.get(_kind_of(error), INTERNAL_STATUS_CODE)


def message_for(error: BaseException | ErrorKind | None) -> str:
    """Return the user facing message for an error or error kind."""
    return _MESSAGES.get(_kind_of(error), INTERNAL_MESSAGE)
