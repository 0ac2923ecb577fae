# core/response.py

"""
Result objects returned by registry, parsing, and export operations.

Operations never raise to the CLI. They return a `Response` that either carries a payload in `data`
or an `ErrorCode` with a message ready for display. Each error code knows the HTTP-style status it maps to,
so callers only name the error.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    # identifier is blank after trimming
    EMPTY_ID = "EMPTY_ID"
    DUPLICATE_ID = "DUPLICATE_ID"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"

    # mark is non-numeric, non-finite, or outside 0-100
    INVALID_NUMBER = "INVALID_NUMBER"

    # CSV destination could not be opened or written
    IO_ERROR = "IO_ERROR"

    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def status_code(self) -> int:
        if self is ErrorCode.STUDENT_NOT_FOUND:
            return 404

        if self in (ErrorCode.IO_ERROR, ErrorCode.INTERNAL_ERROR):
            return 500

        return 400


class Response:
    """
    Outcome of a single operation.

    Attributes:
        success (bool): Whether the operation succeeded.
        detail (str | None): Human-readable message for the console.
        error (ErrorCode | None): What went wrong, None on success.
        status_code (int): 200 on success, otherwise the status of `error`.
        data (dict): Operation-specific payload, empty on failure.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        data: dict[str, Any] | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._data = dict(data) if data else {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def status_code(self) -> int:
        return self._error.status_code if self._error else 200

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def record(self) -> Any:
        # shortcut for lookups and additions, which return the affected record
        return self._data.get("record")

    # === public classmethods ===

    @classmethod
    def succeed(
        cls, detail: str | None = None, data: dict[str, Any] | None = None
    ) -> Response:
        return cls(success=True, detail=detail, data=data)

    @classmethod
    def fail(cls, detail: str, error: ErrorCode) -> Response:
        return cls(success=False, detail=detail, error=error)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Response({self._success}, {self._error}, {self._detail!r})"

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"

        return f"Error: {self.error.value if self.error else ''} - {self.detail or ''}"
