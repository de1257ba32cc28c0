"""
Symfony generator — ``symfony new <project>``.

Without the Symfony CLI, offers a bare directory skeleton with a
placeholder front controller.
"""

from __future__ import annotations

from projgen.core.generators.base import GeneratorStrategy
from projgen.core.models.invocation import ProjectKind


class SymfonyStrategy(GeneratorStrategy):
    kind = ProjectKind.PHP_FRAMEWORK
    label = "Symfony PHP"
    fallback_question = (
        "Symfony CLI is missing. Create directory structure manually as fallback?"
    )
    install_hint = (
        "Please install the Symfony CLI from https://symfony.com/download and try again."
    )

    def tool_args(self) -> list[str]:
        return ["new", self.project_name]
