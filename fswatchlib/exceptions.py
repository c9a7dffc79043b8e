"""Exception type and error codes used throughout the library."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes carried by :class:`FswError`."""

    OK = 0
    UNKNOWN_ERROR = 1 << 0
    UNKNOWN_VALUE = 1 << 1
    CALLBACK_NOT_SET = 1 << 2
    INVALID_LATENCY = 1 << 3
    INVALID_REGEX = 1 << 4
    UNKNOWN_MONITOR_TYPE = 1 << 5


class FswError(Exception):
    """Base error of the library: a message plus an integer error code."""

    def __init__(self, cause: str, code: int = ErrorCode.UNKNOWN_ERROR) -> None:
        super().__init__(cause)
        self.cause = cause
        self.code = code

    def __str__(self) -> str:
        return self.cause

    def __int__(self) -> int:
        return int(self.code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cause!r}, {self.code!r})"