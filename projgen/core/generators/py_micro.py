"""
Flask generator — always the hand-built scaffold, then a virtualenv.

Flask ships no project generator, so there is nothing to probe for.
"""

from __future__ import annotations

from projgen.core.generators.base import GeneratorStrategy
from projgen.core.models.invocation import ProjectKind


class FlaskStrategy(GeneratorStrategy):
    kind = ProjectKind.PY_MICRO
    label = "Python Flask"
    provisions_environment = True
