"""
Runner base — the contract between generator strategies and tools.

Strategies never call ``shutil`` or ``subprocess`` themselves. They
probe for and run external generators through this interface, so the
real implementation can be swapped for a mock in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from projgen.core.models.outcome import ProcessResult


class ProcessRunner(ABC):
    """Abstract base class for process runners.

    To create a new runner:
        1. Subclass ProcessRunner
        2. Implement name, probe, run
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'subprocess', 'mock')."""

    @abstractmethod
    def probe(self, tool: str) -> bool:
        """Check whether an executable is resolvable on the search path.

        Resolvable means found, not healthy: no version check is made.
        Should be fast and never raise.
        """

    @abstractmethod
    def run(
        self,
        tool: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
    ) -> ProcessResult:
        """Run a tool to completion and return its exit status.

        MUST never raise for a failing or missing tool. Failures are
        captured in the ProcessResult.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
