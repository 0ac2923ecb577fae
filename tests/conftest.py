# tests/conftest.py

import pytest

from cli.app_context import AppContext
from models.registry import StudentRegistry
from models.student import Student


@pytest.fixture
def sample_student():
    student = Student("s1", "Ana")
    student.set_mark("Math", 95.0)
    student.set_mark("Sci", 85.0)
    return student


@pytest.fixture
def sample_registry():
    return StudentRegistry()


@pytest.fixture
def populated_registry():
    registry = StudentRegistry()

    s1 = registry.add_student("S1", "First").record
    s1.set_mark("Math", 80.0)
    s1.set_mark("Sci", 70.0)

    s2 = registry.add_student("S2", "Second").record
    s2.set_mark("Sci", 60.0)
    s2.set_mark("Art", 90.0)

    return registry


@pytest.fixture
def scripted_context(tmp_path):
    """
    Builds an `AppContext` whose input comes from a fixed list of lines.

    Usage: `context = scripted_context(["1", "s1", "Ana", "0"])`
    """

    def _build(lines, registry=None):
        remaining = iter(lines)
        return AppContext(
            registry=registry,
            read_line=lambda _prompt: next(remaining),
            export_path=str(tmp_path / "student_report.csv"),
        )

    return _build
