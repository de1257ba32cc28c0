"""
Filesystem writer — lay a fallback scaffold down on disk.

Directory creation is create-if-absent, so running it twice is safe.
File writes overwrite. Any OS error stops the run with the exact path;
whatever was already written stays in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from projgen.core.generators.errors import ScaffoldIOError
from projgen.core.models.scaffold import FallbackScaffold

logger = logging.getLogger(__name__)

_EXECUTABLE_MODE = 0o755


def materialize(scaffold: FallbackScaffold, base_dir: Path | None = None) -> list[Path]:
    """Create a scaffold's directories, then write its files.

    Args:
        scaffold: The scaffold to write.
        base_dir: Directory the project directory is created in
            (default: current directory).

    Returns:
        Every path created or written, directories first.

    Raises:
        ScaffoldIOError: On the first directory or file that fails.
    """
    root = (base_dir or Path(".")) / scaffold.project_name
    written: list[Path] = []

    for rel in scaffold.directories:
        target = root / rel
        _mkdir(target)
        written.append(target)

    for entry in scaffold.files:
        target = root / entry.path
        # parent may not be in the directory list (e.g. manage.py at the root)
        _mkdir(target.parent)
        try:
            target.write_text(entry.content, encoding="utf-8")
            if entry.executable:
                target.chmod(_EXECUTABLE_MODE)
        except OSError as e:
            raise ScaffoldIOError(target, "create file", e) from e
        logger.debug("Wrote %s (%d bytes)", target, len(entry.content))
        written.append(target)

    logger.info("Materialized %s scaffold at %s", scaffold.kind, root)
    return written


def _mkdir(target: Path) -> None:
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldIOError(target, "create directory", e) from e
