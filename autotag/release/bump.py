from __future__ import annotations

from collections.abc import Iterable, Sequence

from autotag.release.commits import classify_commit, commit_header
from autotag.release.model import BumpDecision, BumpSummary, CommitCategory

# Highest first: the first category present decides the bump.
_PRECEDENCE: tuple[tuple[CommitCategory, BumpDecision], ...] = (
    (CommitCategory.MAJOR, BumpDecision.MAJOR),
    (CommitCategory.MINOR, BumpDecision.MINOR),
    (CommitCategory.PATCH, BumpDecision.PATCH),
)


def decide_bump(categories: Iterable[CommitCategory]) -> BumpDecision:
    present = set(categories)
    for category, decision in _PRECEDENCE:
        if category in present:
            return decision
    return BumpDecision.NONE


def aggregate(
    categories: Sequence[CommitCategory],
    messages: Sequence[str] | None = None,
) -> BumpSummary:
    """Reduce per-commit categories to a single bump decision.

    Args:
        categories: One category per commit, in batch order.
        messages: The matching raw messages; when given, unrecognized ones are
            kept (first line only) for diagnostics.

    Returns:
        BumpSummary with the decision, per-category flags and diagnostics.
    """
    if messages is not None and len(messages) != len(categories):
        raise ValueError(
            f"categories and messages differ in length: {len(categories)} != {len(messages)}"
        )

    unrecognized: list[str] = []
    if messages is not None:
        unrecognized = [
            commit_header(msg)
            for msg, cat in zip(messages, categories)
            if cat is CommitCategory.UNRECOGNIZED
        ]

    present = set(categories)
    return BumpSummary(
        decision=decide_bump(present),
        total=len(categories),
        major=CommitCategory.MAJOR in present,
        minor=CommitCategory.MINOR in present,
        patch=CommitCategory.PATCH in present,
        unrecognized=tuple(unrecognized),
    )


def summarize_commits(messages: Sequence[str]) -> BumpSummary:
    """Classify every message of a batch and aggregate the result."""
    categories = [classify_commit(m) for m in messages]
    return aggregate(categories, messages)
