"""
Tests for the command router — parsing, dispatch, exit codes.
"""

import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from projgen.adapters.mock import MockRunner
from projgen.main import cli, main, route


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Project Generator" in result.output
        for name in ("php-framework", "py-micro", "py-full", "sys-package"):
            assert name in result.output
        # aliases stay out of the listing
        assert "symfony" not in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_main_help_exits_zero(self, capsys):
        assert main(["--help"]) == 0
        assert route(["--version"]) is None


class TestUsageErrors:
    def test_missing_subcommand(self, workdir: Path, capsys):
        assert main(["--no-prompt"], runner=MockRunner()) == 1
        assert "Missing command" in capsys.readouterr().err

    def test_no_arguments(self, workdir: Path, capsys):
        assert main([], runner=MockRunner()) == 1

    def test_missing_project(self, workdir: Path, capsys):
        assert main(["py-micro"], runner=MockRunner()) == 1
        assert "PROJECT" in capsys.readouterr().err

    def test_empty_project(self, workdir: Path, capsys):
        runner = MockRunner()
        assert main(["py-micro", "  "], runner=runner) == 1
        assert "must not be empty" in capsys.readouterr().err
        assert list(workdir.iterdir()) == []

    def test_two_subcommands(self, workdir: Path, capsys):
        assert main(["py-micro", "a", "py-full", "b"], runner=MockRunner()) == 1
        assert list(workdir.iterdir()) == []

    def test_unknown_subcommand(self, workdir: Path, capsys):
        assert main(["cobol", "demo"], runner=MockRunner()) == 1


class TestScenarios:
    def test_flask_non_interactive(self, workdir: Path, capsys):
        # No python on the mock path: venv setup fails, exit code stays 0
        code = main(["--no-prompt", "py-micro", "demo"], runner=MockRunner())
        assert code == 0
        for d in ("app", "venv", "static", "templates"):
            assert (workdir / "demo" / d).is_dir()
        assert "@app.route" in (workdir / "demo" / "app" / "app.py").read_text()
        out = capsys.readouterr().out
        assert "Failed to create virtual environment" in out
        assert "fallback scaffold" in out

    def test_route_returns_outcome(self, workdir: Path):
        outcome = route(["-y", "py-micro", "demo"], runner=MockRunner(available=["python"]))
        assert outcome.status == "generated-via-fallback"
        assert outcome.environment_ready is True

    def test_cargo_missing(self, workdir: Path, capsys):
        code = main(["sys-package", "demo"], runner=MockRunner())
        assert code == 1
        assert not (workdir / "demo").exists()
        assert "https://rustup.rs" in capsys.readouterr().out

    def test_symfony_tool_failure(self, workdir: Path, capsys):
        runner = MockRunner(available=["symfony"], return_codes={"symfony": 1})
        code = main(["--no-prompt", "php-framework", "demo"], runner=runner)
        assert code == 1
        assert not (workdir / "demo").exists()
        assert "symfony" in capsys.readouterr().out

    def test_django_declined(self, workdir: Path, capsys):
        runner = MockRunner(available=["python"])
        code = main(["py-full", "demo"], runner=runner, confirm=lambda q: False)
        assert code == 1
        assert not (workdir / "demo").exists()
        assert "pip install Django" in capsys.readouterr().out

    def test_django_confirmed(self, workdir: Path):
        asked = []
        code = main(["py-full", "demo"], runner=MockRunner(), confirm=lambda q: asked.append(q) or True)
        assert code == 0
        assert asked == ["django-admin is missing. Create basic scaffold manually as fallback?"]
        assert (workdir / "demo" / "manage.py").is_file()

    def test_cargo_present(self, workdir: Path):
        runner = MockRunner(available=["cargo"])
        assert main(["sys-package", "engine"], runner=runner) == 0
        assert runner.calls_to("cargo") == [["new", "engine"]]


class TestAliases:
    @pytest.mark.parametrize(
        "alias,tool,args",
        [
            ("symfony", "symfony", ["new", "demo"]),
            ("django", "django-admin", ["startproject", "demo", "demo"]),
            ("rust", "cargo", ["new", "demo"]),
        ],
    )
    def test_alias_dispatches(self, alias, tool, args, workdir: Path):
        runner = MockRunner(available=[tool])
        assert main([alias, "demo"], runner=runner) == 0
        assert runner.calls_to(tool) == [args]

    def test_flask_alias(self, workdir: Path):
        assert main(["-y", "flask", "demo"], runner=MockRunner()) == 0
        assert (workdir / "demo" / "app" / "app.py").is_file()


class TestConfigOption:
    def test_tool_override(self, workdir: Path):
        config = workdir / "custom.yml"
        config.write_text(textwrap.dedent("""\
            tools:
              sys-package: cargo-nightly
        """))
        runner = MockRunner(available=["cargo-nightly"])
        assert main(["--config", str(config), "sys-package", "demo"], runner=runner) == 0
        assert runner.calls_to("cargo-nightly") == [["new", "demo"]]

    def test_settings_file_in_cwd(self, workdir: Path):
        (workdir / "projgen.yml").write_text("python: [python3.12]\n")
        runner = MockRunner(available=["python3.12"])
        outcome = route(["-y", "py-micro", "demo"], runner=runner)
        assert outcome.environment_ready is True
        assert runner.call_log[0][0] == "python3.12"

    def test_invalid_config(self, workdir: Path, capsys):
        config = workdir / "bad.yml"
        config.write_text("tools: [1, 2]\n")
        assert main(["-c", str(config), "py-micro", "demo"], runner=MockRunner()) == 1
        assert "Invalid settings" in capsys.readouterr().out
        assert not (workdir / "demo").exists()


class TestQuiet:
    def test_quiet_hides_progress(self, workdir: Path, capsys):
        runner = MockRunner(available=["cargo"])
        assert main(["-q", "sys-package", "demo"], runner=runner) == 0
        out = capsys.readouterr().out
        assert "Found cargo" not in out
        assert "demo created" in out


class TestVenvDirSetting:
    def test_venv_dir_from_settings(self, workdir: Path):
        (workdir / "projgen.yml").write_text("venv_dir: .venv\n")
        runner = MockRunner(available=["python"])
        assert main(["-y", "py-micro", "demo"], runner=runner) == 0
        assert runner.calls_to("python") == [["-m", "venv", str(Path("demo") / ".venv")]]
        assert (workdir / "demo" / "app" / "app.py").is_file()

    def test_manual_hint_uses_venv_dir(self, workdir: Path, capsys):
        (workdir / "projgen.yml").write_text("venv_dir: .venv\n")
        assert main(["-y", "py-micro", "demo"], runner=MockRunner()) == 0
        captured = capsys.readouterr()
        assert "python -m venv .venv" in captured.out
        # reported once, as a status line
        assert "Python interpreter" not in captured.err
