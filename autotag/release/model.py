from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Literal


class CommitCategory(Enum):
    """Classification of a single commit header."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    UNRECOGNIZED = "unrecognized"


class BumpDecision(IntEnum):
    """Bump to apply for a whole batch; ordered NONE < PATCH < MINOR < MAJOR."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()


ReleaseState = Literal["published", "dry_run_reported", "skipped"]


@dataclass(frozen=True, slots=True)
class RepoIdentity:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.slug


@dataclass(frozen=True, slots=True)
class BumpSummary:
    """Outcome of classifying one commit batch."""

    decision: BumpDecision
    total: int
    major: bool = False
    minor: bool = False
    patch: bool = False
    # First line of each commit that matched no rule.
    unrecognized: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    state: ReleaseState
    identity: RepoIdentity
    previous_tag: str
    new_tag: str
    summary: BumpSummary

    @property
    def changed(self) -> bool:
        return self.previous_tag != self.new_tag
