"""
Tests for domain models — invocation, scaffold, process result, outcome.
"""

import pytest
from pydantic import ValidationError

from projgen.core.models import (
    ExecutionOutcome,
    FallbackScaffold,
    Invocation,
    ProcessResult,
    ProjectKind,
    ScaffoldFile,
)


class TestInvocation:
    def test_kind_from_command_name(self):
        inv = Invocation(kind="py-micro", project_name="demo")
        assert inv.kind is ProjectKind.PY_MICRO
        assert inv.non_interactive is False

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Invocation(kind=ProjectKind.PY_FULL, project_name="")

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Invocation(kind="cobol", project_name="demo")

    def test_immutable(self):
        inv = Invocation(kind=ProjectKind.PY_FULL, project_name="demo")
        with pytest.raises(ValidationError):
            inv.project_name = "other"


class TestFallbackScaffold:
    def test_empty(self):
        scaffold = FallbackScaffold(kind=ProjectKind.SYS_PACKAGE, project_name="demo")
        assert scaffold.is_empty
        assert scaffold.file_paths == []

    def test_file_paths(self):
        scaffold = FallbackScaffold(
            kind=ProjectKind.PY_MICRO,
            project_name="demo",
            directories=["app"],
            files=[ScaffoldFile(path="app/app.py", content="")],
        )
        assert not scaffold.is_empty
        assert scaffold.file_paths == ["app/app.py"]


class TestProcessResult:
    def test_ok(self):
        assert ProcessResult(tool="cargo", args=["new", "x"]).ok

    def test_nonzero_not_ok(self):
        assert not ProcessResult(tool="cargo", return_code=101).ok

    def test_error_not_ok(self):
        assert not ProcessResult(tool="cargo", return_code=-1, error="boom").ok

    def test_command_line(self):
        result = ProcessResult(tool="django-admin", args=["startproject", "a", "a"])
        assert result.command_line == "django-admin startproject a a"


class TestExecutionOutcome:
    def test_via_tool(self):
        o = ExecutionOutcome.via_tool(ProjectKind.SYS_PACKAGE, "demo")
        assert o.generated
        assert not o.aborted
        assert o.exit_code == 0

    def test_via_fallback(self):
        o = ExecutionOutcome.via_fallback(ProjectKind.PY_MICRO, "demo")
        assert o.status == "generated-via-fallback"
        assert o.exit_code == 0
        assert o.environment_ready is None

    def test_abort(self):
        o = ExecutionOutcome.abort(ProjectKind.PY_FULL, "demo", reason="declined")
        assert o.aborted
        assert o.reason == "declined"
        assert o.exit_code == 1
