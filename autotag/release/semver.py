from __future__ import annotations

import re
from dataclasses import dataclass, field

from autotag.core.result import Err, Ok, Result
from autotag.release.errors import ReleaseError
from autotag.release.model import BumpDecision

# Literal dots, ASCII digits only; used with fullmatch so no trailing newline slips through.
_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    """A MAJOR.MINOR.PATCH version.

    ``digits`` keeps each component as written in the tag, so components a
    bump leaves alone render exactly as they were read (``01.4.2`` stays
    ``01.4.2``). It takes no part in equality or ordering.
    """

    major: int
    minor: int
    patch: int
    digits: tuple[str, str, str] | None = field(default=None, compare=False, repr=False)

    def _texts(self) -> tuple[str, str, str]:
        if self.digits is not None:
            return self.digits
        return (str(self.major), str(self.minor), str(self.patch))

    def to_tag(self) -> str:
        return ".".join(self._texts())

    def __str__(self) -> str:
        return self.to_tag()

    def bump(self, decision: BumpDecision) -> SemVer:
        major, minor, _ = self._texts()
        match decision:
            case BumpDecision.MAJOR:
                return SemVer(self.major + 1, 0, 0)
            case BumpDecision.MINOR:
                return SemVer(
                    self.major, self.minor + 1, 0, digits=(major, str(self.minor + 1), "0")
                )
            case BumpDecision.PATCH:
                return SemVer(
                    self.major,
                    self.minor,
                    self.patch + 1,
                    digits=(major, minor, str(self.patch + 1)),
                )
            case BumpDecision.NONE:
                return self
            case _:
                raise AssertionError(f"unexpected bump decision: {decision}")


def parse_version(tag: str) -> Result[SemVer, ReleaseError]:
    m = _VERSION_RE.fullmatch(tag)
    if m is None:
        return Err(
            ReleaseError(
                kind="invalid_version_format",
                message=f"Latest release tag name is not semver. Found: {tag!r}",
                hint="expected MAJOR.MINOR.PATCH, e.g. 1.4.2 (no 'v' prefix)",
            )
        )
    major, minor, patch = m.group(1, 2, 3)
    return Ok(SemVer(int(major), int(minor), int(patch), digits=(major, minor, patch)))


def next_tag(tag: str, decision: BumpDecision) -> Result[str, ReleaseError]:
    """Parse ``tag``, apply ``decision`` and render the result."""
    parsed = parse_version(tag)
    if isinstance(parsed, Err):
        return parsed
    return Ok(parsed.value.bump(decision).to_tag())
