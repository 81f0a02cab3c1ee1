from __future__ import annotations

import pytest

from autotag.release.commits import COMMIT_RULES, classify_commit, commit_header
from autotag.release.model import CommitCategory


@pytest.mark.parametrize(
    "message",
    [
        "chore: bump deps",
        "docs: readme",
        "fix: null check",
        "refactor: split module",
        "revert: undo thing",
        "style: format",
        "test: cover edge case",
        "chore(ci): bump action",
        "fix(): empty scope",
    ],
)
def test_patch(message: str) -> None:
    assert classify_commit(message) is CommitCategory.PATCH


@pytest.mark.parametrize("message", ["feat: add export", "feat(api): add endpoint"])
def test_minor(message: str) -> None:
    assert classify_commit(message) is CommitCategory.MINOR


@pytest.mark.parametrize("message", ["break: remove old API", "break(cli): drop flag"])
def test_major(message: str) -> None:
    assert classify_commit(message) is CommitCategory.MAJOR


@pytest.mark.parametrize(
    "message",
    [
        "",
        "Merge pull request #12 from acme/feature",
        "feat:no space",
        "feat: ",
        "feat:",
        "Feat: capitalised",
        "feature: not a type",
        "perf: not in the grammar",
        "feat!: bang is not supported",
        "feat(a)(b): double scope",
        " fix: leading space",
        "fixes: plural",
    ],
)
def test_unrecognized(message: str) -> None:
    assert classify_commit(message) is CommitCategory.UNRECOGNIZED


def test_only_header_is_considered() -> None:
    message = "Update things\n\nfeat: this line is in the body"
    assert classify_commit(message) is CommitCategory.UNRECOGNIZED


def test_body_does_not_change_header_category() -> None:
    message = "fix: null check\n\nbreak: mentioned in body"
    assert classify_commit(message) is CommitCategory.PATCH


def test_crlf_header() -> None:
    assert classify_commit("feat: windows\r\n\r\nbody") is CommitCategory.MINOR


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
def test_header_ends_only_at_newline(separator: str) -> None:
    message = f"fix: null{separator}check\n\nbody"
    assert commit_header(message) == f"fix: null{separator}check"
    assert classify_commit(message) is CommitCategory.PATCH


def test_rules_keep_fixed_order() -> None:
    assert [category for category, _ in COMMIT_RULES] == [
        CommitCategory.PATCH,
        CommitCategory.MINOR,
        CommitCategory.MAJOR,
    ]


def test_commit_header() -> None:
    assert commit_header("a\nb") == "a"
    assert commit_header("") == ""
    assert commit_header("a\r\nb") == "a"
