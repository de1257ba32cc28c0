"""
Project Generator — CLI entrypoint and command router.

Usage:
    projgen --help
    projgen php-framework my-site
    projgen --no-prompt py-micro demo
    projgen py-full shop
    projgen sys-package engine

The original ecosystem names work as aliases: ``symfony``, ``flask``,
``django``, ``rust``.

Exit codes: 0 when a project was generated (by the official tool or by
the fallback scaffold), 1 when the run was aborted or failed.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import partial
from pathlib import Path
from typing import Sequence

import click

from projgen import __version__
from projgen.adapters.base import ProcessRunner
from projgen.core.config.loader import ConfigError
from projgen.core.generators.base import ConfirmCallback
from projgen.core.generators.errors import GeneratorError
from projgen.core.models.invocation import Invocation, ProjectKind
from projgen.core.models.outcome import ExecutionOutcome
from projgen.core.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)

# kind, command name, alias, help
_COMMANDS: tuple[tuple[ProjectKind, str, str, str], ...] = (
    (ProjectKind.PHP_FRAMEWORK, "php-framework", "symfony", "Create a Symfony PHP project."),
    (ProjectKind.PY_MICRO, "py-micro", "flask", "Create a Python Flask project."),
    (ProjectKind.PY_FULL, "py-full", "django", "Create a Django project."),
    (ProjectKind.SYS_PACKAGE, "sys-package", "rust", "Create a Rust package with Cargo."),
)

_EVENT_STYLES = {
    "info": ("  ", None),
    "ok": ("✓ ", "green"),
    "warn": ("⚠️  ", "yellow"),
    "error": ("❌ ", "red"),
}


@click.group(no_args_is_help=False)
@click.version_option(version=__version__, prog_name="projgen")
@click.option(
    "--no-prompt",
    "-y",
    "no_prompt",
    is_flag=True,
    help="Never ask; answer yes to every confirmation.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only print the final result and errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a settings file (default: $PROJGEN_CONFIG or ./projgen.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    no_prompt: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Project Generator — scaffold starter projects for several frameworks."""
    ctx.ensure_object(dict)
    ctx.obj["no_prompt"] = no_prompt
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PROJGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("PROJGEN_LOG_FILE"),
        log_file_level=os.environ.get("PROJGEN_LOG_FILE_LEVEL"),
    )


def _echo_event(quiet: bool, level: str, message: str) -> None:
    if quiet and level in ("info", "ok"):
        return
    icon, color = _EVENT_STYLES.get(level, ("  ", None))
    click.secho(f"{icon}{message}", fg=color)


def _prompt(question: str) -> bool:
    return click.confirm(question, default=True)


def _generate(ctx: click.Context, kind: ProjectKind, project: str) -> ExecutionOutcome:
    from projgen.core.config.loader import load_settings
    from projgen.core.use_cases.generate import generate_project

    if not project.strip():
        raise click.UsageError("Project name must not be empty.", ctx=ctx)

    invocation = Invocation(
        kind=kind,
        project_name=project,
        non_interactive=ctx.obj["no_prompt"],
    )
    quiet = ctx.obj.get("quiet", False)

    outcome = generate_project(
        invocation,
        runner=ctx.obj.get("runner"),
        confirm=ctx.obj.get("confirm") or _prompt,
        settings=load_settings(ctx.obj.get("config_path")),
        on_event=partial(_echo_event, quiet),
    )

    if outcome.status == "generated-via-tool":
        click.secho(f"✅ {project} created with the official generator", fg="green", bold=True)
    elif outcome.status == "generated-via-fallback":
        click.secho(f"✅ {project} created from the fallback scaffold", fg="green", bold=True)
    else:
        click.secho(f"⊘ {project} was not created ({outcome.reason})", fg="yellow", bold=True)
    return outcome


def _make_command(kind: ProjectKind, name: str, help_text: str, hidden: bool = False) -> click.Command:
    @click.command(name=name, help=help_text, hidden=hidden)
    @click.argument("project")
    @click.pass_context
    def command(ctx: click.Context, project: str) -> ExecutionOutcome:
        return _generate(ctx, kind, project)

    return command


for _kind, _name, _alias, _help in _COMMANDS:
    cli.add_command(_make_command(_kind, _name, _help))
    cli.add_command(_make_command(_kind, _alias, f"Alias for '{_name}'.", hidden=True))


def route(
    argv: Sequence[str] | None = None,
    runner: ProcessRunner | None = None,
    confirm: ConfirmCallback | None = None,
) -> ExecutionOutcome | None:
    """Parse ``argv``, run the selected strategy, return its outcome.

    Returns None when nothing was generated on purpose (``--help``,
    ``--version``). Usage errors and hard generator errors propagate.
    """
    obj = {"runner": runner, "confirm": confirm}
    rv = cli.main(
        args=list(argv) if argv is not None else None,
        prog_name="projgen",
        standalone_mode=False,
        obj=obj,
    )
    return rv if isinstance(rv, ExecutionOutcome) else None


def main(
    argv: Sequence[str] | None = None,
    runner: ProcessRunner | None = None,
    confirm: ConfirmCallback | None = None,
) -> int:
    """Run the router and map its result to a process exit code."""
    try:
        outcome = route(argv, runner=runner, confirm=confirm)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except (GeneratorError, ConfigError) as e:
        logger.debug("Generation failed", exc_info=True)
        click.secho(f"❌ {e}", fg="red")
        return 1

    if outcome is None:
        return 0
    return outcome.exit_code


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
