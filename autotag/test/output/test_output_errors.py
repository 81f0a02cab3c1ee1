from __future__ import annotations

from pathlib import Path

import pytest

from autotag.core.config import ConfigError
from autotag.core.errors import ErrorCode
from autotag.output.console import MockConsole, Style
from autotag.output.errors import print_config_error, print_release_error, release_error_exit_code
from autotag.release.errors import ReleaseError, ReleaseErrorKind


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("identity", ErrorCode.USER_ERROR),
        ("invalid_version_format", ErrorCode.USER_ERROR),
        ("tag_fetch", ErrorCode.NETWORK_ERROR),
        ("commit_fetch", ErrorCode.NETWORK_ERROR),
        ("release_creation", ErrorCode.NETWORK_ERROR),
    ],
)
def test_exit_codes(kind: ReleaseErrorKind, code: ErrorCode) -> None:
    assert release_error_exit_code(ReleaseError(kind=kind, message="x")) == int(code)


def test_every_exit_code_is_failure() -> None:
    for kind in ("identity", "tag_fetch"):
        assert release_error_exit_code(ReleaseError(kind=kind, message="x")) != 0


def test_print_release_error_with_hint() -> None:
    console = MockConsole()
    print_release_error(ReleaseError(kind="identity", message="bad", hint="set it"), console)
    assert console.messages == ["error: bad", "hint: set it"]
    assert console.outputs[1].style == Style.DIM


def test_print_config_error() -> None:
    console = MockConsole()
    print_config_error(ConfigError("unreadable", path=Path("/tmp/e.json")), console)
    assert console.messages[0] == "error: unreadable"
    assert "e.json" in console.messages[1]


def test_release_error_pretty() -> None:
    assert ReleaseError(kind="tag_fetch", message="m").pretty() == "m"
    assert ReleaseError(kind="tag_fetch", message="m", hint="h").pretty() == "m (hint: h)"
