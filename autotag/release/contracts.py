"""Contracts between the release flow and the hosting service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from autotag.core.result import Result
from autotag.release.errors import ReleaseError
from autotag.release.model import RepoIdentity


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Normalized inputs for one release run."""

    payload_owner: str
    payload_repo: str
    repository_override: str | None = None
    dry_run: bool = False
    skip_unchanged: bool = False
    head_ref: str = "HEAD"


class ReleaseBackend(Protocol):
    """Hosting-service operations consumed by the release flow.

    Implementations map their own failures to ``tag_fetch``,
    ``commit_fetch`` and ``release_creation`` errors and never retry.
    """

    def get_latest_tag(self, identity: RepoIdentity) -> Result[str, ReleaseError]: ...

    def list_commits_between(
        self,
        identity: RepoIdentity,
        base: str,
        head: str,
    ) -> Result[list[str], ReleaseError]:
        """Every commit message after ``base`` up to ``head``, oldest first."""
        ...

    def create_release(self, identity: RepoIdentity, tag: str) -> Result[None, ReleaseError]: ...
