from __future__ import annotations

import typer

from autotag.core.errors import ErrorCode
from autotag.core.result import Err
from autotag.release.bump import summarize_commits
from autotag.release.semver import parse_version


def next_version(
    tag: str = typer.Argument(..., help="Current version, e.g. 1.4.2"),
    messages: list[str] | None = typer.Argument(None, help="Commit messages since TAG"),
) -> None:
    """Print the tag that `run` would release, without touching GitHub.

    The tag goes to stdout; the decision and ignored commits go to stderr.
    """
    version = parse_version(tag)
    if isinstance(version, Err):
        typer.echo(f"error: {version.error.pretty()}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    summary = summarize_commits(messages or [])
    typer.echo(f"bump: {summary.decision}", err=True)
    for header in summary.unrecognized:
        typer.echo(f"ignored: {header}", err=True)
    typer.echo(version.value.bump(summary.decision).to_tag())
