"""Tests for autotag.core.result module."""

from __future__ import annotations

import pytest

from autotag.core.result import Err, Ok, Result, is_err, is_ok


def _half(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"odd: {n}")
    return Ok(n // 2)


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(3).unwrap() == 3

    def test_flags(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Err("boom").unwrap()

    def test_frozen(self) -> None:
        err = Err("boom")
        with pytest.raises(AttributeError):
            err.error = "other"  # type: ignore[misc]


def test_type_guards() -> None:
    assert is_ok(_half(4))
    assert is_err(_half(3))


def test_pattern_matching() -> None:
    match _half(3):
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "odd: 3"
