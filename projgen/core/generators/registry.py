"""
Strategy registry — project kind → generator strategy.

The router never branches on the kind itself; it asks the registry.
"""

from __future__ import annotations

from typing import Any

from projgen.core.generators.base import GeneratorStrategy
from projgen.core.generators.php import SymfonyStrategy
from projgen.core.generators.py_full import DjangoStrategy
from projgen.core.generators.py_micro import FlaskStrategy
from projgen.core.generators.sys_package import CargoStrategy
from projgen.core.models.invocation import Invocation, ProjectKind

STRATEGIES: dict[ProjectKind, type[GeneratorStrategy]] = {
    ProjectKind.PHP_FRAMEWORK: SymfonyStrategy,
    ProjectKind.PY_MICRO: FlaskStrategy,
    ProjectKind.PY_FULL: DjangoStrategy,
    ProjectKind.SYS_PACKAGE: CargoStrategy,
}


def get_strategy_class(kind: ProjectKind) -> type[GeneratorStrategy]:
    """Look up the strategy class for a kind."""
    return STRATEGIES[ProjectKind(kind)]


def create_strategy(invocation: Invocation, **deps: Any) -> GeneratorStrategy:
    """Instantiate the strategy for an invocation.

    Args:
        invocation: The parsed command.
        **deps: Passed through to the strategy (runner, confirm,
            settings, base_dir, on_event).
    """
    return get_strategy_class(invocation.kind)(invocation, **deps)
