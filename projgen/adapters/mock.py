"""
Mock runner — test double for probe and run.

Configurable per tool: whether it is on the search path and which exit
code it returns. Every call is logged so tests can assert what ran.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from projgen.adapters.base import ProcessRunner
from projgen.core.models.outcome import ProcessResult


class MockRunner(ProcessRunner):
    """Universal mock runner for testing.

    By default no tool is available and every run succeeds.
    """

    def __init__(
        self,
        available: Sequence[str] = (),
        return_codes: dict[str, int] | None = None,
    ):
        self._available = set(available)
        self._return_codes: dict[str, int] = dict(return_codes or {})
        self._probe_log: list[str] = []
        self._call_log: list[tuple[str, list[str], Path | None]] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def probe_log(self) -> list[str]:
        """Every tool name probe() was asked about, in order."""
        return self._probe_log

    @property
    def call_log(self) -> list[tuple[str, list[str], Path | None]]:
        """All (tool, args, cwd) triples run() has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls_to(self, tool: str) -> list[list[str]]:
        """Argument lists of every run of ``tool``."""
        return [args for name, args, _ in self._call_log if name == tool]

    def set_available(self, tool: str, available: bool = True) -> None:
        if available:
            self._available.add(tool)
        else:
            self._available.discard(tool)

    def set_return_code(self, tool: str, code: int) -> None:
        """Configure a tool to exit with a specific status."""
        self._return_codes[tool] = code

    def probe(self, tool: str) -> bool:
        self._probe_log.append(tool)
        return tool in self._available

    def run(
        self,
        tool: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
    ) -> ProcessResult:
        self._call_log.append((tool, list(args), cwd))
        return ProcessResult(
            tool=tool,
            args=list(args),
            return_code=self._return_codes.get(tool, 0),
        )

    def reset(self) -> None:
        """Clear call logs and configured exit codes."""
        self._probe_log.clear()
        self._call_log.clear()
        self._return_codes.clear()
