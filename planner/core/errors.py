"""Domain errors raised by the Planner core."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    DUPLICATE_PARTICIPANT = "DUPLICATE_PARTICIPANT"
    DUPLICATE_ITEM = "DUPLICATE_ITEM"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateEntityError(DomainError):
    """Raised when adding a participant or item whose name is already taken.

    Names are compared case-insensitively within the owning event.
    """

    MESSAGES = {
        "participant": (ErrorCode.DUPLICATE_PARTICIPANT, "Duplicate participant!"),
        "item": (ErrorCode.DUPLICATE_ITEM, "Duplicate item!"),
    }

    def __init__(self, entity: str, name: str) -> None:
        if entity not in self.MESSAGES:
            raise ValueError(f"Unknown entity kind: {entity}")
        code, message = self.MESSAGES[entity]
        super().__init__(code=code, message=message)
        self.entity = entity
        self.name = name
