# core/validators.py

"""
Validating parsers for raw console input.

Each parser takes a raw text line and returns a `Response`. On success the parsed value is found in
`response.data`. On failure the response carries an `ErrorCode` and a message suitable for display,
and the caller decides whether to re-prompt or abandon the operation.
"""

import math

from core.response import ErrorCode, Response

MIN_MARK = 0.0
MAX_MARK = 100.0

DEFAULT_NAME = "Unknown"


def parse_mark(text: str) -> Response:
    """
    Parses a mark from a line of user input.

    Args:
        text (str): The raw input line. Leading and trailing whitespace is ignored.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the input is a finite number between `MIN_MARK` and `MAX_MARK`, inclusive.
                - False otherwise.
            - detail (str | None):
                - On failure, "Invalid number. Try again." or "Mark must be between 0 and 100.".
                - On success, None.
            - error (ErrorCode | None):
                - `ErrorCode.INVALID_NUMBER` on failure.
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "mark" (float): The parsed mark.

    Notes:
        - NaN and infinities are rejected as invalid numbers.
        - Only plain ASCII decimal notation is accepted: digit separators ("1_0") and non-ASCII digits are rejected.
        - Bounds are compared with ordinary floating-point semantics.
    """
    text = text.strip()

    if not text.isascii() or "_" in text:
        return Response.fail(
            detail="Invalid number. Try again.",
            error=ErrorCode.INVALID_NUMBER,
        )

    try:
        mark = float(text)

    except ValueError:
        return Response.fail(
            detail="Invalid number. Try again.",
            error=ErrorCode.INVALID_NUMBER,
        )

    if not math.isfinite(mark):
        return Response.fail(
            detail="Invalid number. Try again.",
            error=ErrorCode.INVALID_NUMBER,
        )

    if mark < MIN_MARK or mark > MAX_MARK:
        return Response.fail(
            detail=f"Mark must be between {MIN_MARK:g} and {MAX_MARK:g}.",
            error=ErrorCode.INVALID_NUMBER,
        )

    return Response.succeed(data={"mark": mark})


def normalize_student_id(text: str) -> str:
    return text.strip()


def normalize_student_name(text: str) -> str:
    name = text.strip()
    return name if name else DEFAULT_NAME
