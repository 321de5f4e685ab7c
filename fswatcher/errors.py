"""Status codes and the exception raised by the library."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Status codes reported by library operations."""

    OK = 0
    UNKNOWN_ERROR = 1 << 0
    SESSION_UNKNOWN = 1 << 1
    MONITOR_ALREADY_EXISTS = 1 << 2
    MEMORY = 1 << 3
    UNKNOWN_MONITOR_TYPE = 1 << 4
    CALLBACK_NOT_SET = 1 << 5
    PATHS_NOT_SET = 1 << 6
    MISSING_CONTEXT = 1 << 7
    INVALID_PATH = 1 << 8
    INVALID_CALLBACK = 1 << 9
    INVALID_LATENCY = 1 << 10
    INVALID_REGEX = 1 << 11
    MONITOR_ALREADY_RUNNING = 1 << 12
    UNKNOWN_VALUE = 1 << 13
    INVALID_PROPERTY = 1 << 14


class FswatchError(Exception):
    """An error carrying a message and an :class:`ErrorCode`."""

    def __init__(self, message: str, code: ErrorCode | int = ErrorCode.UNKNOWN_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.code = ErrorCode(code)

    def __int__(self) -> int:
        return int(self.code)

    def __str__(self) -> str:
        return self.message