"""
Fallback scaffold builder — minimal layouts for when a generator is missing.

``build_scaffold`` is pure: no I/O, no randomness. The same kind and
name always give the same directories and byte-identical contents.
Writing them out is ``projgen.adapters.shell.filesystem.materialize``.

Layouts:
    php-framework  config/ public/ src/ templates/ var/ vendor/
                   public/index.php
    py-micro       app/ venv/ static/ templates/
                   app/app.py
    py-full        project/ app/ venv/
                   manage.py (executable), project/{__init__,settings,urls}.py,
                   app/__init__.py
    sys-package    (none; cargo is mandatory)
"""

from __future__ import annotations

from typing import Callable

from projgen.core.models.invocation import ProjectKind
from projgen.core.models.scaffold import FallbackScaffold, ScaffoldFile

# ── PHP framework (Symfony) ─────────────────────────────────────

_PHP_DIRS = ("config", "public", "src", "templates", "var", "vendor")

_PHP_INDEX = """\
<?php
// Symfony front controller placeholder for {name}
"""

# ── Python micro-framework (Flask) ──────────────────────────────

_FLASK_DIRS = ("app", "venv", "static", "templates")

_FLASK_APP = """\
\"\"\"{name} — Flask application entry point.\"\"\"

from flask import Flask

app = Flask(__name__)


@app.route("/")
def hello():
    return "Here we go again!"


if __name__ == "__main__":
    app.run(debug=True)
"""

# ── Python full framework (Django) ──────────────────────────────

_DJANGO_DIRS = ("project", "app", "venv")
_DJANGO_PACKAGE = "project"

_DJANGO_MANAGE = """\
#!/usr/bin/env python
\"\"\"Django's command-line utility for administrative tasks of {name}.\"\"\"
import os
import sys

if __name__ == "__main__":
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "{package}.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError("Couldn't import Django.") from exc
    execute_from_command_line(sys.argv)
"""

_DJANGO_SETTINGS = """\
\"\"\"Minimal Django settings for {name}.\"\"\"

SECRET_KEY = "your-secret-key"
DEBUG = True
ALLOWED_HOSTS = []
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "app",
]
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]
ROOT_URLCONF = "{package}.urls"
"""

_DJANGO_URLS = """\
\"\"\"URL configuration for {name}.\"\"\"

urlpatterns = []
"""


def _php(name: str) -> FallbackScaffold:
    return FallbackScaffold(
        kind=ProjectKind.PHP_FRAMEWORK,
        project_name=name,
        directories=list(_PHP_DIRS),
        files=[ScaffoldFile(path="public/index.php", content=_PHP_INDEX.format(name=name))],
    )


def _flask(name: str) -> FallbackScaffold:
    return FallbackScaffold(
        kind=ProjectKind.PY_MICRO,
        project_name=name,
        directories=list(_FLASK_DIRS),
        files=[ScaffoldFile(path="app/app.py", content=_FLASK_APP.format(name=name))],
    )


def _django(name: str) -> FallbackScaffold:
    fmt = {"name": name, "package": _DJANGO_PACKAGE}
    return FallbackScaffold(
        kind=ProjectKind.PY_FULL,
        project_name=name,
        directories=list(_DJANGO_DIRS),
        files=[
            ScaffoldFile(path="manage.py", content=_DJANGO_MANAGE.format(**fmt), executable=True),
            ScaffoldFile(path=f"{_DJANGO_PACKAGE}/__init__.py", content=""),
            ScaffoldFile(
                path=f"{_DJANGO_PACKAGE}/settings.py",
                content=_DJANGO_SETTINGS.format(**fmt),
            ),
            ScaffoldFile(path=f"{_DJANGO_PACKAGE}/urls.py", content=_DJANGO_URLS.format(**fmt)),
            ScaffoldFile(path="app/__init__.py", content=""),
        ],
    )


def _none(name: str) -> FallbackScaffold:
    return FallbackScaffold(kind=ProjectKind.SYS_PACKAGE, project_name=name)


_BUILDERS: dict[ProjectKind, Callable[[str], FallbackScaffold]] = {
    ProjectKind.PHP_FRAMEWORK: _php,
    ProjectKind.PY_MICRO: _flask,
    ProjectKind.PY_FULL: _django,
    ProjectKind.SYS_PACKAGE: _none,
}


def build_scaffold(kind: ProjectKind, project_name: str) -> FallbackScaffold:
    """Return the fallback layout for a project kind.

    Args:
        kind: Project kind.
        project_name: Embedded into file contents (docstrings, comments).

    Returns:
        FallbackScaffold; empty for kinds without a fallback.
    """
    return _BUILDERS[ProjectKind(kind)](project_name)
