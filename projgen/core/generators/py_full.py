"""
Django generator — ``django-admin startproject <project> <project>``.

The project name doubles as the settings package name. The admin
script refuses a target directory that does not exist, so it is
created first. Without django-admin, offers a minimal scaffold with
``manage.py`` and a settings module. Either way a virtualenv is set up
afterwards.
"""

from __future__ import annotations

import logging

from projgen.core.generators.base import GeneratorStrategy
from projgen.core.generators.errors import ScaffoldIOError
from projgen.core.models.invocation import ProjectKind

logger = logging.getLogger(__name__)


class DjangoStrategy(GeneratorStrategy):
    kind = ProjectKind.PY_FULL
    label = "Django"
    provisions_environment = True
    fallback_question = (
        "django-admin is missing. Create basic scaffold manually as fallback?"
    )
    install_hint = (
        "Please install Django (pip install Django) to use the standard generator."
    )

    def tool_args(self) -> list[str]:
        # startproject <package name> <target directory>
        return ["startproject", self.project_name, self.project_name]

    def prepare_tool_run(self) -> None:
        target = self.project_dir
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScaffoldIOError(target, "create directory", e) from e
        logger.debug("Prepared startproject target %s", target)
