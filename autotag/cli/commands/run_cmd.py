from __future__ import annotations

import os
from pathlib import Path

import typer

from autotag.cli.context import build_console
from autotag.core.config import (
    INPUT_DRY_RUN,
    INPUT_GITHUB_TOKEN,
    INPUT_REPOSITORY,
    INPUT_SKIP_UNCHANGED,
    load_action_config,
    load_event_payload,
)
from autotag.core.errors import ErrorCode
from autotag.core.result import Err
from autotag.github.api import GitHubReleaseBackend
from autotag.github.http import RealHttpClient
from autotag.github.outputs import outcome_outputs, write_step_outputs
from autotag.output.console import Style
from autotag.output.errors import print_config_error, print_release_error, release_error_exit_code
from autotag.release.contracts import ReleaseRequest
from autotag.release.identity import identity_from_payload
from autotag.release.service import run_release


def run(
    token: str | None = typer.Option(
        None, "--token", "-t", help="GitHub token (default: $INPUT_GITHUB_TOKEN)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Compute the tag but do not create the release."
    ),
    repository: str | None = typer.Option(
        None, "--repository", "-r", help="owner/repo (overrides the event payload)"
    ),
    skip_unchanged: bool = typer.Option(
        False, "--skip-unchanged", help="Do not publish when no commit requires a bump."
    ),
    event_path: Path | None = typer.Option(
        None, "--event-path", help="Event payload JSON (default: $GITHUB_EVENT_PATH)"
    ),
    api_url: str | None = typer.Option(
        None, "--api-url", help="GitHub API base URL (default: $GITHUB_API_URL)"
    ),
    plain: bool = typer.Option(False, "--plain", help="Rich output even inside Actions."),
) -> None:
    """Compute the next tag from commits since the latest release and publish it."""
    env = dict(os.environ)
    if token:
        env[INPUT_GITHUB_TOKEN] = token
    if dry_run:
        env[INPUT_DRY_RUN] = "true"
    if repository:
        env[INPUT_REPOSITORY] = repository
    if skip_unchanged:
        env[INPUT_SKIP_UNCHANGED] = "true"
    if event_path is not None:
        env["GITHUB_EVENT_PATH"] = str(event_path)
    if api_url:
        env["GITHUB_API_URL"] = api_url

    console = build_console(env, plain=plain)

    config_r = load_action_config(env)
    if isinstance(config_r, Err):
        print_config_error(config_r.error, console)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    config = config_r.value
    console.print(f"Config: {config!r}", Style.DIM)

    payload_r = load_event_payload(config.event_path)
    if isinstance(payload_r, Err):
        print_config_error(payload_r.error, console)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    payload_owner, payload_repo = identity_from_payload(payload_r.value)

    backend = GitHubReleaseBackend(
        http=RealHttpClient(token=config.github_token),
        api_url=config.api_url,
    )
    request = ReleaseRequest(
        payload_owner=payload_owner,
        payload_repo=payload_repo,
        repository_override=config.repository,
        dry_run=config.dry_run,
        skip_unchanged=config.skip_unchanged,
    )

    outcome_r = run_release(backend=backend, console=console, request=request)
    if isinstance(outcome_r, Err):
        print_release_error(outcome_r.error, console)
        raise typer.Exit(code=release_error_exit_code(outcome_r.error))

    if config.output_path is not None:
        written = write_step_outputs(config.output_path, outcome_outputs(outcome_r.value))
        # The release already exists at this point; only report.
        if isinstance(written, Err):
            console.warning(written.error.message)
