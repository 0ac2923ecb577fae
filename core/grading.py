# core/grading.py

"""
Letter grade rules.

Maps a numeric average to a letter grade using a fixed table of descending,
inclusive thresholds. Any average below the lowest threshold receives the fallback grade.
"""

GRADE_THRESHOLDS: list[tuple[float, str]] = [
    (90.0, "A+"),
    (80.0, "A"),
    (70.0, "B"),
    (60.0, "C"),
    (50.0, "D"),
]

FAILING_GRADE = "F"


def to_letter_grade(average: float) -> str:
    """
    Returns the letter grade for a numeric average.

    Args:
        average (float): The average mark. Values outside 0-100 are accepted and fall into the top or bottom band.

    Returns:
        The letter grade of the first band whose threshold the average meets or exceeds.
    """
    for threshold, letter in GRADE_THRESHOLDS:
        if average >= threshold:
            return letter

    return FAILING_GRADE
