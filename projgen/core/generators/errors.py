"""
Generator errors — hard failures that end a run with exit code 1.

Soft failures (missing cargo, a declined fallback, a failed venv) are
not exceptions: they come back as an ``aborted`` outcome or a
``False`` from environment setup.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for errors raised while generating a project."""


class ToolExecutionError(GeneratorError):
    """The official generator ran and exited with a failure status."""

    def __init__(self, tool: str, return_code: int, detail: str = ""):
        self.tool = tool
        self.return_code = return_code
        message = f"Failed to create project with {tool} (exit status {return_code})."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class ScaffoldIOError(GeneratorError):
    """A directory or file of a fallback scaffold could not be written."""

    def __init__(self, path: Path, action: str, cause: OSError):
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action} {path}: {cause.strerror or cause}")
