"""Domain error codes for the check-in core.

All of these are expected, recoverable outcomes. Services raise them and the
handlers in middlewares/error_handlers.py turn them into 4xx responses.
Storage failures are not wrapped here and propagate unchanged.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TOKEN = "INVALID_TOKEN"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    DUPLICATE_CONSTRAINT = "DUPLICATE_CONSTRAINT"
    CROSS_EVENT_MISMATCH = "CROSS_EVENT_MISMATCH"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    status_code = 400

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_detail(self) -> dict:
        return {"code": self.code.value, "message": self.message}


class InvalidTokenError(DomainError):
    """Raised when a scanned token is unknown or of the wrong kind."""

    def __init__(self, role: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOKEN,
            message=f"QR code not recognized as a valid {role} code",
        )
        self.role = role


class EntityNotFoundError(DomainError):
    """Raised when a referenced event, attendee or booth does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id=None) -> None:
        super().__init__(
            code=ErrorCode.ENTITY_NOT_FOUND,
            message=f"{entity} not found",
        )
        self.entity = entity
        self.entity_id = entity_id


class DuplicateConstraintError(DomainError):
    """Raised when a uniqueness rule would be violated on create."""

    status_code = 409

    def __init__(self, message: str = "Record already exists") -> None:
        super().__init__(code=ErrorCode.DUPLICATE_CONSTRAINT, message=message)


class CrossEventMismatchError(DomainError):
    """Raised when an attendee or booth belongs to another event than the scan target."""

    status_code = 409

    def __init__(self, event_id, attendee_event_id=None, booth_event_id=None) -> None:
        sides = []
        if attendee_event_id is not None and attendee_event_id != event_id:
            sides.append("attendee")
        if booth_event_id is not None and booth_event_id != event_id:
            sides.append("booth")
        super().__init__(
            code=ErrorCode.CROSS_EVENT_MISMATCH,
            message=f"{' and '.join(sides).capitalize() or 'Entity'} does not belong to this event",
        )
        self.event_id = event_id
        self.attendee_event_id = attendee_event_id
        self.booth_event_id = booth_event_id
        self.mismatched = sides
