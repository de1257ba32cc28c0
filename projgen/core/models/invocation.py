"""
Invocation model — what the user asked for.

An invocation is created once by the router from the parsed command
line and handed, unchanged, to the matching generator strategy.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ProjectKind(StrEnum):
    """The four kinds of project the tool can scaffold."""

    PHP_FRAMEWORK = "php-framework"   # Symfony
    PY_MICRO = "py-micro"             # Flask
    PY_FULL = "py-full"               # Django
    SYS_PACKAGE = "sys-package"       # Rust / Cargo


class Invocation(BaseModel):
    """A parsed command: project kind, project name, prompt mode."""

    model_config = ConfigDict(frozen=True)

    kind: ProjectKind
    project_name: str = Field(min_length=1)
    non_interactive: bool = False
