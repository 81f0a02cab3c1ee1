"""Conventional-commit header classification.

Only the first line of a message is considered. Rules are tried in the
order of ``COMMIT_RULES`` and the first match wins.
"""

from __future__ import annotations

import re

from autotag.release.model import CommitCategory

_SCOPE = r"(\([^)]*\))?"

PATCH_TYPES: tuple[str, ...] = ("chore", "docs", "fix", "refactor", "revert", "style", "test")

COMMIT_RULES: tuple[tuple[CommitCategory, re.Pattern[str]], ...] = (
    (CommitCategory.PATCH, re.compile(rf"({'|'.join(PATCH_TYPES)}){_SCOPE}: .+")),
    (CommitCategory.MINOR, re.compile(rf"feat{_SCOPE}: .+")),
    (CommitCategory.MAJOR, re.compile(rf"break{_SCOPE}: .+")),
)


def commit_header(message: str) -> str:
    """Return the first line of a commit message."""
    return message.split("\n", 1)[0].removesuffix("\r")


def classify_commit(message: str) -> CommitCategory:
    header = commit_header(message)
    for category, pattern in COMMIT_RULES:
        if pattern.match(header):
            return category
    return CommitCategory.UNRECOGNIZED
