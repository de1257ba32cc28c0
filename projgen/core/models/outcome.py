"""
Process result and execution outcome models.

ProcessResult is what a runner hands back after spawning a tool.
ExecutionOutcome is what a generator strategy hands back to the router.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from projgen.core.models.invocation import ProjectKind


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class ProcessResult(BaseModel):
    """Exit status of one external tool invocation.

    Runners NEVER raise for a failing tool; the failure is captured
    here and it is up to the caller to decide what it means.
    """

    tool: str
    args: list[str] = Field(default_factory=list)
    return_code: int = 0
    started_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the tool exited with status 0."""
        return self.return_code == 0 and self.error is None

    @property
    def command_line(self) -> str:
        return " ".join([self.tool, *self.args])


OutcomeStatus = Literal["generated-via-tool", "generated-via-fallback", "aborted"]


class ExecutionOutcome(BaseModel):
    """Terminal status of a generator strategy.

    ``generated-via-tool`` and ``generated-via-fallback`` map to exit
    code 0, ``aborted`` maps to exit code 1.
    """

    kind: ProjectKind
    project_name: str
    status: OutcomeStatus
    reason: str = ""
    environment_ready: bool | None = None   # None = not attempted
    messages: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def generated(self) -> bool:
        return self.status != "aborted"

    @property
    def aborted(self) -> bool:
        return self.status == "aborted"

    @property
    def exit_code(self) -> int:
        return 0 if self.generated else 1

    @classmethod
    def via_tool(cls, kind: ProjectKind, project_name: str, **kwargs: Any) -> ExecutionOutcome:
        """Create an outcome for a project made by the official generator."""
        return cls(kind=kind, project_name=project_name, status="generated-via-tool", **kwargs)

    @classmethod
    def via_fallback(cls, kind: ProjectKind, project_name: str, **kwargs: Any) -> ExecutionOutcome:
        """Create an outcome for a hand-built scaffold."""
        return cls(kind=kind, project_name=project_name, status="generated-via-fallback", **kwargs)

    @classmethod
    def abort(
        cls,
        kind: ProjectKind,
        project_name: str,
        reason: str,
        **kwargs: Any,
    ) -> ExecutionOutcome:
        """Create an aborted outcome."""
        return cls(kind=kind, project_name=project_name, status="aborted", reason=reason, **kwargs)
