"""
Generate use case — run one project kind's strategy to completion.

This is the router's single call into the core. Hard errors are not
caught here; they propagate to the CLI, which owns exit codes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from projgen.adapters.base import ProcessRunner
from projgen.core.config.loader import Settings, load_settings
from projgen.core.generators.base import ConfirmCallback, EventCallback
from projgen.core.generators.registry import create_strategy
from projgen.core.models.invocation import Invocation
from projgen.core.models.outcome import ExecutionOutcome

logger = logging.getLogger(__name__)


def generate_project(
    invocation: Invocation,
    runner: ProcessRunner | None = None,
    confirm: ConfirmCallback | None = None,
    settings: Settings | None = None,
    base_dir: Path | None = None,
    on_event: EventCallback | None = None,
) -> ExecutionOutcome:
    """Generate one project.

    Args:
        invocation: Kind, name and prompt mode.
        runner: Process runner (default: real subprocesses).
        confirm: Yes/no prompt; unused in non-interactive mode.
        settings: Tool names (default: loaded via ``load_settings``).
        base_dir: Directory the project is created in (default: cwd).
        on_event: Receives every (level, message) status line.

    Returns:
        The strategy's ExecutionOutcome.

    Raises:
        ToolExecutionError: The official generator failed.
        ScaffoldIOError: A fallback directory or file could not be written.
        ConfigError: The settings file is invalid.
    """
    if settings is None:
        settings = load_settings()

    strategy = create_strategy(
        invocation,
        runner=runner,
        confirm=confirm,
        settings=settings,
        base_dir=base_dir,
        on_event=on_event,
    )
    logger.debug("Dispatching %r", strategy)

    outcome = strategy.generate()
    logger.info(
        "%s %s finished: %s%s",
        outcome.kind,
        outcome.project_name,
        outcome.status,
        f" ({outcome.reason})" if outcome.reason else "",
    )
    return outcome
