"""Release flow: previous tag + commits since -> next tag -> release.

The only side effect is the final ``create_release`` call; every earlier
failure stops the run before anything is published.
"""

from __future__ import annotations

from autotag.core.result import Err, Ok, Result
from autotag.output.console import ConsoleProtocol, Style
from autotag.release.bump import summarize_commits
from autotag.release.contracts import ReleaseBackend, ReleaseRequest
from autotag.release.errors import ReleaseError
from autotag.release.identity import resolve_identity
from autotag.release.model import BumpDecision, BumpSummary, ReleaseOutcome
from autotag.release.semver import parse_version


def report_summary(console: ConsoleProtocol, summary: BumpSummary) -> None:
    console.print(f"Commits length: {summary.total}")
    if summary.unrecognized:
        console.warning(
            f"{len(summary.unrecognized)} commit(s) do not follow the conventional format "
            "and were ignored:"
        )
        for header in summary.unrecognized:
            console.print(f"  - {header}")
    console.print(f"Bump major: {summary.major}", Style.DIM)
    console.print(f"Bump minor: {summary.minor}", Style.DIM)
    console.print(f"Bump patch: {summary.patch}", Style.DIM)


def run_release(
    *,
    backend: ReleaseBackend,
    console: ConsoleProtocol,
    request: ReleaseRequest,
) -> Result[ReleaseOutcome, ReleaseError]:
    console.print(f"Dry run: {str(request.dry_run).lower()}")

    identity_r = resolve_identity(
        payload_owner=request.payload_owner,
        payload_repo=request.payload_repo,
        override=request.repository_override,
    )
    if isinstance(identity_r, Err):
        return identity_r
    identity = identity_r.value
    console.print(f"Repository: {identity}")

    tag_r = backend.get_latest_tag(identity)
    if isinstance(tag_r, Err):
        return tag_r
    last_tag = tag_r.value
    console.print(f"Last tag: {last_tag}")

    version_r = parse_version(last_tag)
    if isinstance(version_r, Err):
        return version_r
    version = version_r.value

    commits_r = backend.list_commits_between(identity, last_tag, request.head_ref)
    if isinstance(commits_r, Err):
        return commits_r

    summary = summarize_commits(commits_r.value)
    report_summary(console, summary)

    if summary.decision is BumpDecision.NONE:
        new_tag = last_tag
    else:
        new_tag = version.bump(summary.decision).to_tag()
    console.print(f"New tag: {new_tag}")

    if summary.decision is BumpDecision.NONE:
        if request.skip_unchanged:
            console.info(f"No releasable commits since {last_tag}; release skipped")
            return Ok(
                ReleaseOutcome(
                    state="skipped",
                    identity=identity,
                    previous_tag=last_tag,
                    new_tag=new_tag,
                    summary=summary,
                )
            )
        console.warning(f"No releasable commits since {last_tag}; tag is unchanged")

    if request.dry_run:
        console.print(f"Release {new_tag} was not created since it's a dry run")
        return Ok(
            ReleaseOutcome(
                state="dry_run_reported",
                identity=identity,
                previous_tag=last_tag,
                new_tag=new_tag,
                summary=summary,
            )
        )

    created = backend.create_release(identity, new_tag)
    if isinstance(created, Err):
        return created
    console.success(f"Release {new_tag} created")
    return Ok(
        ReleaseOutcome(
            state="published",
            identity=identity,
            previous_tag=last_tag,
            new_tag=new_tag,
            summary=summary,
        )
    )
