"""
Generator strategy base — the probe → decide → execute → report protocol.

Every project kind runs the same four phases:

    probe     is the official generator on the search path?
    decide    tool, fallback scaffold, or abort
    execute   run the tool, or lay down the scaffold, or do nothing
    report    status lines and the final ExecutionOutcome

Subclasses only declare what differs per kind: the tool, its
arguments, whether a fallback exists, the confirmation question and
the install guidance. The Python kinds also provision a virtualenv.

Hard failures (ToolExecutionError, ScaffoldIOError) are raised and
never retried with the fallback. Declining the fallback, or a missing
tool for a kind with no fallback, is a soft abort.
"""

from __future__ import annotations

import logging
from abc import ABC
from enum import StrEnum
from pathlib import Path
from typing import Callable, ClassVar

from projgen.adapters.base import ProcessRunner
from projgen.adapters.shell.filesystem import materialize
from projgen.core.config.loader import Settings
from projgen.core.generators.errors import GeneratorError, ToolExecutionError
from projgen.core.models.invocation import Invocation, ProjectKind
from projgen.core.models.outcome import ExecutionOutcome
from projgen.core.services.environment import manual_command, setup_environment
from projgen.core.services.scaffolds import build_scaffold

logger = logging.getLogger(__name__)

# (level, message) — level is one of "info", "ok", "warn", "error"
EventCallback = Callable[[str, str], None]
ConfirmCallback = Callable[[str], bool]


class Decision(StrEnum):
    """Which path a strategy takes after probing."""

    TOOL = "tool"
    FALLBACK = "fallback"
    ABORT = "abort"


def _decline(question: str) -> bool:
    return False


class GeneratorStrategy(ABC):
    """Base class for per-kind project generators.

    To add a project kind:
        1. Subclass GeneratorStrategy and set the class attributes
        2. Override tool_args (and prepare_tool_run if needed)
        3. Add a layout to services.scaffolds if it has a fallback
        4. Register it in generators.registry
    """

    kind: ClassVar[ProjectKind]
    label: ClassVar[str]                    # "Symfony PHP", "Django", ...
    has_fallback: ClassVar[bool] = True
    provisions_environment: ClassVar[bool] = False
    fallback_question: ClassVar[str] = ""
    install_hint: ClassVar[str] = ""

    def __init__(
        self,
        invocation: Invocation,
        runner: ProcessRunner | None = None,
        confirm: ConfirmCallback | None = None,
        settings: Settings | None = None,
        base_dir: Path | None = None,
        on_event: EventCallback | None = None,
    ):
        if runner is None:
            from projgen.adapters.shell.command import SubprocessRunner

            runner = SubprocessRunner()

        self.invocation = invocation
        self.runner = runner
        self.confirm = confirm or _decline
        self.settings = settings or Settings()
        self.base_dir = base_dir or Path(".")
        self._on_event = on_event
        self._messages: list[str] = []

    # ── Properties ──────────────────────────────────────────────

    @property
    def project_name(self) -> str:
        return self.invocation.project_name

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.project_name

    @property
    def tool(self) -> str | None:
        """Executable name of the official generator, None if there is none."""
        return self.settings.tool_for(self.kind)

    @property
    def messages(self) -> list[str]:
        """Status lines reported so far, in order."""
        return list(self._messages)

    def tool_args(self) -> list[str]:
        """Arguments passed to the official generator."""
        return [self.project_name]

    def prepare_tool_run(self) -> None:
        """Hook run right before the official generator is spawned."""

    # ── Reporting ───────────────────────────────────────────────

    def notify(self, level: str, message: str) -> None:
        """Record a status line and forward it to the event callback."""
        self._messages.append(message)
        logger.debug("[%s] %s: %s", self.kind, level, message)
        if self._on_event is not None:
            self._on_event(level, message)

    # ── Phase 1: probe ──────────────────────────────────────────

    def probe(self) -> bool:
        """Look the official generator up on the search path.

        Kinds without a generator skip the lookup and report False.
        Never cached: every call asks the runner again.
        """
        tool = self.tool
        if tool is None:
            return False

        available = self.runner.probe(tool)
        if available:
            command = " ".join([tool, *self.tool_args()])
            self.notify("info", f"Found {tool}. Using '{command}'.")
        else:
            self.notify("warn", f"{tool} not found.")
        return available

    # ── Phase 2: decide ─────────────────────────────────────────

    def decide(self, tool_available: bool) -> Decision:
        if tool_available:
            return Decision.TOOL

        if not self.has_fallback:
            return Decision.ABORT

        # Pure-fallback kinds have nothing to ask about
        if self.tool is None:
            return Decision.FALLBACK

        if self.invocation.non_interactive:
            self.notify("info", "Non-interactive mode: creating the fallback structure.")
            return Decision.FALLBACK

        if self.confirm(self.fallback_question):
            return Decision.FALLBACK
        return Decision.ABORT

    # ── Phase 3: execute ────────────────────────────────────────

    def execute(self, decision: Decision) -> ExecutionOutcome:
        if decision is Decision.TOOL:
            return self._run_tool()
        if decision is Decision.FALLBACK:
            return self._build_fallback()
        return self._abort()

    def _run_tool(self) -> ExecutionOutcome:
        tool = self.tool
        if tool is None:
            raise GeneratorError(f"{self.label} has no official generator to run.")
        args = self.tool_args()

        self.prepare_tool_run()
        result = self.runner.run(tool, args, cwd=self.base_dir)
        if not result.ok:
            raise ToolExecutionError(tool, result.return_code, result.error or "")

        self.notify("ok", f"{self.label} project created with {tool}.")
        return ExecutionOutcome.via_tool(
            self.kind,
            self.project_name,
            metadata={"command": result.command_line, "duration_ms": result.duration_ms},
        )

    def _build_fallback(self) -> ExecutionOutcome:
        scaffold = build_scaffold(self.kind, self.project_name)
        materialize(scaffold, self.base_dir)

        self.notify("ok", f"Fallback {self.label} project structure created in {self.project_dir}.")
        return ExecutionOutcome.via_fallback(
            self.kind,
            self.project_name,
            metadata={"directories": scaffold.directories, "files": scaffold.file_paths},
        )

    def _abort(self) -> ExecutionOutcome:
        if self.has_fallback:
            reason = "declined"
            self.notify("warn", self.install_hint)
        else:
            reason = "missing-dependency"
            self.notify("error", self.install_hint)
        return ExecutionOutcome.abort(self.kind, self.project_name, reason=reason)

    # ── Post-step: isolated environment ─────────────────────────

    def provision_environment(self) -> bool:
        """Create the project's virtualenv; failure is only reported."""
        self.notify("info", "Setting up Python virtual environment...")
        ready = setup_environment(
            self.project_dir,
            runner=self.runner,
            interpreters=self.settings.python,
            venv_dir=self.settings.venv_dir,
        )
        if ready:
            self.notify("ok", "Virtual environment created successfully!")
        else:
            self.notify(
                "warn",
                "Failed to create virtual environment. "
                f"Create it manually with '{manual_command(self.settings.venv_dir)}' in {self.project_dir}.",
            )
        return ready

    # ── Phase 4: report ─────────────────────────────────────────

    def generate(self) -> ExecutionOutcome:
        """Run all four phases and return the final outcome."""
        self.notify("info", f"Creating {self.label} project for: {self.project_name}")

        tool_available = self.probe()
        decision = self.decide(tool_available)
        logger.info("%s %s: decided %s", self.kind, self.project_name, decision)

        outcome = self.execute(decision)

        update: dict = {}
        if outcome.generated and self.provisions_environment:
            update["environment_ready"] = self.provision_environment()

        update["messages"] = self.messages
        return outcome.model_copy(update=update)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.kind!s} project={self.project_name!r}>"
