"""
Cargo generator — ``cargo new <project>``.

Cargo is mandatory: when it is missing the run aborts with install
guidance, without a prompt and without touching the filesystem.
"""

from __future__ import annotations

from projgen.core.generators.base import GeneratorStrategy
from projgen.core.models.invocation import ProjectKind


class CargoStrategy(GeneratorStrategy):
    kind = ProjectKind.SYS_PACKAGE
    label = "Rust"
    has_fallback = False
    install_hint = (
        "Cargo was not found on your system. "
        "Please install Rust (and Cargo) from https://rustup.rs."
    )

    def tool_args(self) -> list[str]:
        return ["new", self.project_name]
