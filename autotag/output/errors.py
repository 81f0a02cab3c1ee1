"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from autotag.core.errors import ErrorCode
from autotag.output.console import Style
from autotag.release.errors import ReleaseError

if TYPE_CHECKING:
    from autotag.core.config import ConfigError
    from autotag.output.console import ConsoleProtocol

__all__ = ["print_config_error", "print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"path: {error.path}", Style.DIM)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "identity" | "invalid_version_format":
            return int(ErrorCode.USER_ERROR)
        case "tag_fetch" | "commit_fetch" | "release_creation":
            return int(ErrorCode.NETWORK_ERROR)
    return int(ErrorCode.USER_ERROR)
