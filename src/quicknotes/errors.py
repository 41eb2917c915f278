from enum import StrEnum
from typing import Self


class ErrorKind(StrEnum):
    """Category of an API failure, each bound to an HTTP status code."""

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INTERNAL = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def is_operational(self) -> bool:
        """Expected client-facing failures are operational, internal faults are not."""
        return self is not ErrorKind.INTERNAL


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PAYLOAD_TOO_LARGE: 413,
    ErrorKind.INTERNAL: 500,
}


class ApiError(Exception):
    """Typed failure raised by validators and handlers.

    Operational errors carry a message that is safe to show to the client.
    Non-operational errors are only described in the server log, the client
    gets a generic message.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def is_operational(self) -> bool:
        return self.kind.is_operational

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.name}, status_code={self.status_code}, message={self.message!r})"

    @classmethod
    def bad_request(cls, message: str) -> Self:
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> Self:
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def payload_too_large(cls, message: str = "Request body too large") -> Self:
        return cls(ErrorKind.PAYLOAD_TOO_LARGE, message)

    @classmethod
    def internal(cls, message: str = "Internal Server Error") -> Self:
        return cls(ErrorKind.INTERNAL, message)
