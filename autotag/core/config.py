"""Typed run configuration loaded from the GitHub Actions environment.

Action inputs reach the process as ``INPUT_<NAME>`` variables and the runner
context as ``GITHUB_*`` variables. Everything is parsed exactly once here into
an immutable ``ActionConfig``; the rest of the code never reads ``os.environ``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict

__all__ = [
    "ActionConfig",
    "ConfigError",
    "DEFAULT_API_URL",
    "load_action_config",
    "load_event_payload",
    "parse_bool_input",
]

DEFAULT_API_URL = "https://api.github.com"

INPUT_GITHUB_TOKEN = "INPUT_GITHUB_TOKEN"
INPUT_DRY_RUN = "INPUT_DRY_RUN"
INPUT_REPOSITORY = "INPUT_REPOSITORY"
INPUT_SKIP_UNCHANGED = "INPUT_SKIP_UNCHANGED"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the run configuration cannot be loaded."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ActionConfig:
    """Run configuration for one release invocation."""

    github_token: str
    dry_run: bool = False
    repository: str | None = None
    skip_unchanged: bool = False
    event_path: Path | None = None
    api_url: str = DEFAULT_API_URL
    output_path: Path | None = None
    in_actions: bool = False

    def __repr__(self) -> str:
        # Keep the token out of tracebacks and debug output.
        return (
            f"ActionConfig(dry_run={self.dry_run}, repository={self.repository!r}, "
            f"skip_unchanged={self.skip_unchanged}, event_path={self.event_path!r}, "
            f"api_url={self.api_url!r}, in_actions={self.in_actions})"
        )


def parse_bool_input(value: str | None) -> bool:
    """Parse an action boolean input: only ``"true"`` is true."""
    if value is None:
        return False
    return value.strip().lower() == "true"


def _optional(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_action_config(env: Mapping[str, str]) -> Result[ActionConfig, ConfigError]:
    """Build the run configuration from an environment mapping.

    Args:
        env: Usually ``os.environ``; tests pass a plain dict.

    Returns:
        Ok(ActionConfig), or Err(ConfigError) when the token is missing.
    """
    token = _optional(env, INPUT_GITHUB_TOKEN)
    if token is None:
        return Err(
            ConfigError(
                "github_token input is required",
                hint="Pass `github_token: ${{ secrets.GITHUB_TOKEN }}` or --token",
            )
        )

    event_path_raw = _optional(env, "GITHUB_EVENT_PATH")
    output_path_raw = _optional(env, "GITHUB_OUTPUT")

    return Ok(
        ActionConfig(
            github_token=token,
            dry_run=parse_bool_input(env.get(INPUT_DRY_RUN)),
            repository=_optional(env, INPUT_REPOSITORY),
            skip_unchanged=parse_bool_input(env.get(INPUT_SKIP_UNCHANGED)),
            event_path=Path(event_path_raw) if event_path_raw else None,
            api_url=(_optional(env, "GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            output_path=Path(output_path_raw) if output_path_raw else None,
            in_actions=parse_bool_input(env.get("GITHUB_ACTIONS")),
        )
    )


def load_event_payload(path: Path | None) -> Result[StrDict, ConfigError]:
    """Read the JSON payload of the triggering event.

    A missing path yields an empty payload: identity must then come from the
    ``repository`` override.
    """
    if path is None:
        return Ok({})

    try:
        data_obj: object = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Event payload not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except json.JSONDecodeError as e:
        return Err(ConfigError(f"Invalid JSON in event payload: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading event payload: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Event payload root must be a JSON object", path=path))
    return Ok(data)
