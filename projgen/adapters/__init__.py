"""Adapters — process runners and filesystem writer.

Public re-exports for convenient access.
"""

from projgen.adapters.base import ProcessRunner
from projgen.adapters.mock import MockRunner
from projgen.adapters.shell.command import SubprocessRunner

__all__ = [
    "MockRunner",
    "ProcessRunner",
    "SubprocessRunner",
]
