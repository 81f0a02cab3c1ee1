from __future__ import annotations

from typer.testing import CliRunner

from autotag import __version__
from autotag.cli.app import app

runner = CliRunner()


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


def test_next_minor() -> None:
    result = runner.invoke(app, ["next", "1.4.2", "feat: add export", "fix: typo"])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "1.5.0"


def test_next_without_messages_keeps_tag() -> None:
    result = runner.invoke(app, ["next", "1.4.2"])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "1.4.2"
    assert "bump: none" in result.output


def test_next_reports_ignored_commits() -> None:
    result = runner.invoke(app, ["next", "1.4.2", "wip", "break: x"])
    assert result.exit_code == 0, result.output
    assert "ignored: wip" in result.output
    assert _last_line(result.output) == "2.0.0"


def test_next_invalid_tag() -> None:
    result = runner.invoke(app, ["next", "v1.4.2"])
    assert result.exit_code == 1
    assert "not semver" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__
