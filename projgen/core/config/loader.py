"""
Settings loader — optional YAML overrides for tool and interpreter names.

Nothing needs configuring for the defaults to work. A settings file
only matters when a generator lives under a different name, e.g. a
versioned ``python3.12`` or a wrapper script around ``symfony``.

Example ``projgen.yml``::

    tools:
      php-framework: symfony
      py-full: django-admin
      sys-package: cargo
    python:
      - python3.12
      - python3
    venv_dir: .venv
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from projgen.core.models.invocation import ProjectKind

logger = logging.getLogger(__name__)

# Default settings filename, looked up in the working directory
SETTINGS_FILE = "projgen.yml"
SETTINGS_ENV_VAR = "PROJGEN_CONFIG"


class ConfigError(Exception):
    """Raised when a settings file is unreadable or invalid."""


class ToolNames(BaseModel):
    """Executable name of each kind's official generator."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    php_framework: str = Field(default="symfony", alias="php-framework", min_length=1)
    py_full: str = Field(default="django-admin", alias="py-full", min_length=1)
    sys_package: str = Field(default="cargo", alias="sys-package", min_length=1)


class Settings(BaseModel):
    """Process-wide settings."""

    model_config = ConfigDict(extra="forbid")

    tools: ToolNames = Field(default_factory=ToolNames)
    # Interpreters tried in order for ``-m venv``
    python: list[str] = Field(default_factory=lambda: ["python", "python3"], min_length=1)
    # Virtualenv directory created inside each Python project
    venv_dir: str = Field(default="venv", min_length=1)

    def tool_for(self, kind: ProjectKind) -> str | None:
        """The generator executable for a kind, or None if it has none."""
        return {
            ProjectKind.PHP_FRAMEWORK: self.tools.php_framework,
            ProjectKind.PY_FULL: self.tools.py_full,
            ProjectKind.SYS_PACKAGE: self.tools.sys_package,
        }.get(kind)


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Locate a settings file: ``$PROJGEN_CONFIG`` first, then ``./projgen.yml``.

    Returns:
        Path to the settings file, or None if there is none.
    """
    from_env = os.environ.get(SETTINGS_ENV_VAR)
    if from_env:
        return Path(from_env)

    candidate = (start_dir or Path.cwd()) / SETTINGS_FILE
    if candidate.is_file():
        return candidate
    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Explicit settings file. If None, searches via
            ``find_settings_file``; no file means built-in defaults.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        path = find_settings_file()

    if path is None:
        logger.debug("No settings file, using defaults")
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
