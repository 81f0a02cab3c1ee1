from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "identity",
    "invalid_version_format",
    "tag_fetch",
    "commit_fetch",
    "release_creation",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Fatal failure of a release run.

    ``message`` always carries the raw value that failed (tag, identity,
    URL and status) so the run can be diagnosed from the log alone.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
