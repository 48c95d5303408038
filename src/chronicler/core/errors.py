"""Error taxonomy shared by the parser, the engine, the upload boundary and the client."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    MALFORMED_LINE = "MALFORMED_LINE"
    INVALID_FORMAT = "INVALID_FORMAT"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    NOT_FOUND = "NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def code(self) -> str:
        return self.value

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS.get(self, 400)

    @property
    def retryable(self) -> bool:
        return self in _RETRYABLE


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.FILE_TOO_LARGE: 413,
    ErrorKind.UNSUPPORTED_TYPE: 415,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NETWORK_ERROR: 503,
    ErrorKind.TIMEOUT_ERROR: 504,
    ErrorKind.INTERNAL_ERROR: 500,
}

_RETRYABLE = frozenset({ErrorKind.NETWORK_ERROR, ErrorKind.TIMEOUT_ERROR, ErrorKind.INTERNAL_ERROR})

USER_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "File is empty or contains no valid data.",
    ErrorKind.MALFORMED_LINE: "File should contain two columns of numbers separated by spaces.",
    ErrorKind.INVALID_FORMAT: "Both lists must contain whole numbers only.",
    ErrorKind.LENGTH_MISMATCH: "Both lists must have the same number of values.",
    ErrorKind.FILE_TOO_LARGE: "File is too large. Please upload a smaller file.",
    ErrorKind.UNSUPPORTED_TYPE: "Only plain text (.txt) files are supported.",
    ErrorKind.NOT_FOUND: "The requested resource does not exist.",
    ErrorKind.NETWORK_ERROR: "Please check your internet connection and try again.",
    ErrorKind.TIMEOUT_ERROR: "The request took too long. Please try again.",
    ErrorKind.INTERNAL_ERROR: "Something went wrong. Please try again.",
}


class ChroniclerError(Exception):
    """Raised for every expected failure of the core and of the client.

    ``message`` is the detailed, developer-facing description (it may name
    line numbers or offending tokens); ``user_message`` is the short text
    shown to end users.
    """

    def __init__(self, kind: ErrorKind, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]

    def __repr__(self) -> str:
        return f"ChroniclerError({self.kind.code}, {self.message!r})"
