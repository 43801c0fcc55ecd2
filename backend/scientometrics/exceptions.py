from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """
    Failure categories surfaced by the search / persist service.

    INVALID_ARGUMENT - caller parameter violates a precondition
    UPSTREAM         - the search API failed or reported a failure
    PERSISTENCE      - resolving a researcher or saving an article failed
    """
    INVALID_ARGUMENT = "invalid_argument"
    UPSTREAM = "upstream"
    PERSISTENCE = "persistence"


class ScholarServiceError(RuntimeError):
    """
    Single error type for the service, tagged by ``kind``.

    The HTTP layer maps ``kind`` to a response code; nothing in the
    service retries on it.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def invalid_argument(cls, message: str) -> "ScholarServiceError":
        return cls(ErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def upstream(
        cls,
        message: str,
        status_code: int = 500,
        cause: Optional[BaseException] = None,
    ) -> "ScholarServiceError":
        return cls(ErrorKind.UPSTREAM, message, status_code=status_code, cause=cause)

    @classmethod
    def persistence(cls, message: str, cause: Optional[BaseException] = None) -> "ScholarServiceError":
        return cls(ErrorKind.PERSISTENCE, message, cause=cause)

    def __repr__(self) -> str:
        return (
            f"ScholarServiceError(kind={self.kind.value!r}, message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )
