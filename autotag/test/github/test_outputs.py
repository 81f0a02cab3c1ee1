from __future__ import annotations

from pathlib import Path

from autotag.core.result import Err, Ok
from autotag.github.outputs import outcome_outputs, write_step_outputs
from autotag.release.model import BumpDecision, BumpSummary, ReleaseOutcome, RepoIdentity


def _outcome(state: str = "published") -> ReleaseOutcome:
    return ReleaseOutcome(
        state=state,  # type: ignore[arg-type]
        identity=RepoIdentity("acme", "widgets"),
        previous_tag="1.4.2",
        new_tag="1.5.0",
        summary=BumpSummary(decision=BumpDecision.MINOR, total=2, minor=True, patch=True),
    )


def test_outcome_outputs() -> None:
    assert outcome_outputs(_outcome()) == {
        "previous_tag": "1.4.2",
        "new_tag": "1.5.0",
        "bump": "minor",
        "released": "true",
    }
    assert outcome_outputs(_outcome("dry_run_reported"))["released"] == "false"


def test_write_step_outputs_appends(tmp_path: Path) -> None:
    path = tmp_path / "output"
    path.write_text("existing=1\n", encoding="utf-8")

    assert write_step_outputs(path, {"new_tag": "1.5.0", "bump": "minor"}) == Ok(None)
    assert path.read_text(encoding="utf-8") == "existing=1\nnew_tag=1.5.0\nbump=minor\n"


def test_write_step_outputs_rejects_multiline(tmp_path: Path) -> None:
    path = tmp_path / "output"
    result = write_step_outputs(path, {"x": "a\nb"})
    assert isinstance(result, Err)
    assert not path.exists()


def test_write_step_outputs_io_error(tmp_path: Path) -> None:
    result = write_step_outputs(tmp_path / "missing" / "output", {"x": "1"})
    assert isinstance(result, Err)
    assert "failed to write" in result.error.message
