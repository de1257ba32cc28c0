"""
Domain models — Pydantic types for the project generator.

All models are re-exported here for convenient access:

    from projgen.core.models import Invocation, ProjectKind, ExecutionOutcome
"""

from projgen.core.models.invocation import Invocation, ProjectKind
from projgen.core.models.outcome import ExecutionOutcome, ProcessResult
from projgen.core.models.scaffold import FallbackScaffold, ScaffoldFile

__all__ = [
    "ExecutionOutcome",
    "FallbackScaffold",
    "Invocation",
    "ProcessResult",
    "ProjectKind",
    "ScaffoldFile",
]
