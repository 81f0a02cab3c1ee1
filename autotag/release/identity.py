from __future__ import annotations

from collections.abc import Mapping

from autotag.core.result import Err, Ok, Result
from autotag.core.structured import get_path_str
from autotag.release.errors import ReleaseError
from autotag.release.model import RepoIdentity


def identity_from_payload(payload: Mapping[str, object]) -> tuple[str, str]:
    """Extract (owner login, repo name) from an event payload; missing fields are ''."""
    owner = get_path_str(payload, "repository", "owner", "login") or ""
    repo = get_path_str(payload, "repository", "name") or ""
    return owner, repo


def resolve_identity(
    *,
    payload_owner: str,
    payload_repo: str,
    override: str | None = None,
) -> Result[RepoIdentity, ReleaseError]:
    """Pick the repository to release.

    A non-empty ``override`` ("owner/repo") replaces the payload identity
    entirely; scheduled and manual triggers carry no repository payload.
    """
    owner, repo = payload_owner, payload_repo
    source = "payload"
    if override and override.strip():
        owner, _, repo = override.strip().partition("/")
        source = "repository input"
        if "/" in repo:
            return Err(
                ReleaseError(
                    kind="identity",
                    message=f"Repository retrieved from {source} is not valid: {override!r}",
                    hint="expected owner/repo",
                )
            )

    owner = owner.strip()
    repo = repo.strip()
    if not owner:
        return Err(
            ReleaseError(
                kind="identity",
                message=f"Owner retrieved from {source} is not valid (owner={owner!r}, repo={repo!r})",
                hint="set the `repository` input to owner/repo",
            )
        )
    if not repo:
        return Err(
            ReleaseError(
                kind="identity",
                message=f"Repo retrieved from {source} is not valid (owner={owner!r}, repo={repo!r})",
                hint="set the `repository` input to owner/repo",
            )
        )
    return Ok(RepoIdentity(owner=owner, repo=repo))
