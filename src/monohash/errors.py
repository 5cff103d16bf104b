"""Application exceptions."""

from __future__ import annotations

from typing import Any


class MonohashError(Exception):
    """Base error for monohash operations."""


class ExportParseError(MonohashError):
    """Raised when an export description cannot be parsed.

    ``cause`` is the lower-level failure that made parsing impossible, if any.
    It is kept by identity and, when it is an exception, also installed as
    ``__cause__`` so standard traceback tooling sees the chain.
    """

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Any:
        return self._cause

    def __str__(self) -> str:
        return str(self._message)

    def __repr__(self) -> str:
        if self._cause is None:
            return f"{type(self).__name__}({self._message!r})"
        return f"{type(self).__name__}({self._message!r}, {self._cause!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._message, self._cause))
