from __future__ import annotations

import pytest

from autotag.release.bump import aggregate, decide_bump, summarize_commits
from autotag.release.model import BumpDecision, CommitCategory

P = CommitCategory.PATCH
MI = CommitCategory.MINOR
MA = CommitCategory.MAJOR
U = CommitCategory.UNRECOGNIZED


@pytest.mark.parametrize(
    ("categories", "expected"),
    [
        ([], BumpDecision.NONE),
        ([U, U], BumpDecision.NONE),
        ([P], BumpDecision.PATCH),
        ([U, P, U], BumpDecision.PATCH),
        ([P, MI], BumpDecision.MINOR),
        ([MA, P], BumpDecision.MAJOR),
        ([P, MI, MA, U], BumpDecision.MAJOR),
    ],
)
def test_decide_bump(categories: list[CommitCategory], expected: BumpDecision) -> None:
    assert decide_bump(categories) is expected


def test_decision_order() -> None:
    assert BumpDecision.MAJOR > BumpDecision.MINOR > BumpDecision.PATCH > BumpDecision.NONE
    assert str(BumpDecision.MINOR) == "minor"


def test_aggregate_flags_and_count() -> None:
    summary = aggregate([P, P, MI, U])
    assert summary.decision is BumpDecision.MINOR
    assert summary.total == 4
    assert (summary.major, summary.minor, summary.patch) == (False, True, True)
    assert summary.unrecognized == ()


def test_aggregate_length_mismatch() -> None:
    with pytest.raises(ValueError):
        aggregate([P], ["fix: a", "fix: b"])


def test_summarize_collects_unrecognized_headers() -> None:
    summary = summarize_commits(
        ["fix: a", "Merge branch 'main'\n\ndetails", "wip", "chore(ci): b"]
    )
    assert summary.decision is BumpDecision.PATCH
    assert summary.total == 4
    assert summary.unrecognized == ("Merge branch 'main'", "wip")


def test_summarize_empty_batch() -> None:
    summary = summarize_commits([])
    assert summary.decision is BumpDecision.NONE
    assert summary.total == 0
