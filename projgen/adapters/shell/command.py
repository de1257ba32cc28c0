"""
Subprocess runner — resolve and run real executables.

Tools inherit the terminal: generators like ``symfony new`` print
progress and may ask their own questions, so nothing is captured.
There is no timeout; a hung tool hangs the command.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path
from typing import Sequence

from projgen.adapters.base import ProcessRunner
from projgen.core.models.outcome import ProcessResult

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunner):
    """Probe with ``shutil.which``, run with ``subprocess.run``."""

    @property
    def name(self) -> str:
        return "subprocess"

    def probe(self, tool: str) -> bool:
        found = shutil.which(tool)
        logger.debug("which %s -> %s", tool, found)
        return found is not None

    def run(
        self,
        tool: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
    ) -> ProcessResult:
        argv = [tool, *args]
        logger.debug("Executing: %s (cwd=%s)", " ".join(argv), cwd)
        start = time.monotonic()

        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as e:
            # Missing binary, permission denied, bad cwd
            return ProcessResult(
                tool=tool,
                args=list(args),
                return_code=-1,
                duration_ms=int((time.monotonic() - start) * 1000),
                error=f"Command execution error: {e}",
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("%s exited with %d after %dms", tool, completed.returncode, elapsed_ms)
        return ProcessResult(
            tool=tool,
            args=list(args),
            return_code=completed.returncode,
            duration_ms=elapsed_ms,
        )
