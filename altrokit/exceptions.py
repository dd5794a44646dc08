"""Error types raised by the solver components."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Reason attached to an :class:`AltroError`."""

    NO_ERROR = 0
    DIMENSION_UNKNOWN = 1
    BAD_INDEX = 2
    DIMENSION_MISMATCH = 3
    SOLVER_NOT_INITIALIZED = 4
    SOLVER_ALREADY_INITIALIZED = 5
    NON_POSITIVE = 6
    FILE_ERROR = 7


class AltroError(RuntimeError):
    """Runtime error that carries an :class:`ErrorCode`."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, {self.code})"