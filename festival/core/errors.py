"""
Error taxonomy for the festival API.

Services raise these; the exception handlers in festival.main turn them into
``{"error": <message>}`` responses with the status code bound to each code.

Usage:
    from festival.core.errors import EventNotFoundError

    raise EventNotFoundError()
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes with a fixed HTTP status each."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOTH_NOT_FOUND = "BOOTH_NOT_FOUND"
    STORE_BUSY = "STORE_BUSY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.EVENT_NOT_FOUND: 404,
    ErrorCode.BOOTH_NOT_FOUND: 404,
    ErrorCode.STORE_BUSY: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}


class FestivalError(Exception):
    """Base exception for all festival API errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class ValidationError(FestivalError):
    """A required field is missing or holds an unacceptable value."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.VALIDATION_ERROR)


class EventNotFoundError(FestivalError):
    def __init__(self, message: str = "Event not found"):
        super().__init__(message, code=ErrorCode.EVENT_NOT_FOUND)


class BoothNotFoundError(FestivalError):
    def __init__(self, message: str = "Booth not found"):
        super().__init__(message, code=ErrorCode.BOOTH_NOT_FOUND)


class StoreBusyError(FestivalError):
    """The store lock could not be acquired in time."""

    def __init__(self, message: str = "Store is busy, please try again."):
        super().__init__(message, code=ErrorCode.STORE_BUSY)


class IdGenerationError(FestivalError):
    """No free identifier was found within the retry budget."""

    pass
