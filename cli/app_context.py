# cli/app_context.py

"""
Session state for the Grade Calculator CLI.

An `AppContext` is created once at start-up and passed to every menu action, so that the registry,
the source of input lines, and the export destination can be swapped out (e.g. by a test harness
supplying a scripted input sequence).
"""

from typing import Callable

from models.exporter import DEFAULT_EXPORT_FILENAME
from models.registry import StudentRegistry


class AppContext:

    def __init__(
        self,
        registry: StudentRegistry | None = None,
        read_line: Callable[[str], str] = input,
        export_path: str = DEFAULT_EXPORT_FILENAME,
    ):
        self._registry: StudentRegistry = (
            registry if registry is not None else StudentRegistry()
        )
        self._read_line: Callable[[str], str] = read_line
        self._export_path: str = export_path

    # === properties ===

    @property
    def registry(self) -> StudentRegistry:
        return self._registry

    @property
    def read_line(self) -> Callable[[str], str]:
        return self._read_line

    @property
    def export_path(self) -> str:
        return self._export_path
