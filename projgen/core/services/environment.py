"""
Isolated environment setup — ``python -m venv`` inside a new project.

Used by both Python project kinds after the project exists. Never
fatal: any failure comes back as ``False`` and the calling strategy
reports it to the user, with ``manual_command`` as the remedy.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from projgen.adapters.base import ProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_INTERPRETERS = ("python", "python3")
DEFAULT_VENV_DIR = "venv"


def manual_command(venv_dir: str = DEFAULT_VENV_DIR) -> str:
    """The command a user can run by hand inside the project."""
    return f"python -m venv {venv_dir}"


def resolve_interpreter(
    runner: ProcessRunner,
    interpreters: Sequence[str] = DEFAULT_INTERPRETERS,
) -> str | None:
    """First interpreter name on the search path, or None."""
    for name in interpreters:
        if runner.probe(name):
            return name
    return None


def setup_environment(
    project_dir: Path,
    runner: ProcessRunner | None = None,
    interpreters: Sequence[str] = DEFAULT_INTERPRETERS,
    venv_dir: str = DEFAULT_VENV_DIR,
) -> bool:
    """Create ``<project_dir>/<venv_dir>`` with the first available interpreter.

    Args:
        project_dir: Root of the generated project.
        runner: Process runner (default: real subprocesses).
        interpreters: Names tried in order.
        venv_dir: Environment directory, relative to ``project_dir``.

    Returns:
        True if the venv was created. An absent interpreter and a
        failing ``venv`` run both give False.
    """
    if runner is None:
        from projgen.adapters.shell.command import SubprocessRunner

        runner = SubprocessRunner()

    interpreter = resolve_interpreter(runner, interpreters)
    if interpreter is None:
        logger.info("No Python interpreter found (tried %s)", ", ".join(interpreters))
        return False

    venv_path = project_dir / venv_dir
    result = runner.run(interpreter, ["-m", "venv", str(venv_path)])
    if not result.ok:
        logger.info(
            "%s failed with status %d%s",
            result.command_line,
            result.return_code,
            f": {result.error}" if result.error else "",
        )
        return False

    logger.info("Virtual environment created at %s", venv_path)
    return True
