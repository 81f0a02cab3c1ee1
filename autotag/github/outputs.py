"""GitHub Actions step outputs (the ``$GITHUB_OUTPUT`` file)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from autotag.core.config import ConfigError
from autotag.core.result import Err, Ok, Result
from autotag.release.model import ReleaseOutcome


def outcome_outputs(outcome: ReleaseOutcome) -> dict[str, str]:
    return {
        "previous_tag": outcome.previous_tag,
        "new_tag": outcome.new_tag,
        "bump": str(outcome.summary.decision),
        "released": "true" if outcome.state == "published" else "false",
    }


def write_step_outputs(path: Path, outputs: Mapping[str, str]) -> Result[None, ConfigError]:
    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" in value or "\r" in value:
            return Err(ConfigError(f"step output {name!r} must be a single line", path=path))
        lines.append(f"{name}={value}\n")

    try:
        with path.open("a", encoding="utf-8") as f:
            f.writelines(lines)
    except OSError as e:
        return Err(ConfigError(f"failed to write step outputs: {e}", path=path))
    return Ok(None)
