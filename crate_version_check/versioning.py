"""
Semantic version parsing and precedence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import semver

from .errors import VersionSyntaxError
from .models import Comparison


@dataclass(frozen=True)
class SemanticVersion:
    """A MAJOR.MINOR.PATCH version with optional pre-release and build metadata.

    Build metadata is kept for display but takes no part in equality,
    hashing or ordering.
    """

    major: int
    minor: int
    patch: int
    pre_release: Tuple[str, ...] = ()
    build_metadata: Optional[str] = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        return parse(text)

    @classmethod
    def from_semver(cls, version: semver.Version) -> "SemanticVersion":
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            pre_release=tuple(version.prerelease.split(".")) if version.prerelease else (),
            build_metadata=version.build,
        )

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=".".join(self.pre_release) or None,
            build=self.build_metadata,
        )

    def __str__(self) -> str:
        return str(self.to_semver())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Comparison.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is not Comparison.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Comparison.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is not Comparison.LESS


def parse(text: str) -> SemanticVersion:
    """Parse ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` into a SemanticVersion.

    Raises:
        VersionSyntaxError: if ``text`` is not a valid semantic version.
    """
    if not isinstance(text, str):
        raise VersionSyntaxError(repr(text), "version must be a string")
    if text != text.strip():
        raise VersionSyntaxError(text, "surrounding whitespace")

    try:
        version = semver.Version.parse(text)
    except ValueError as exc:
        raise VersionSyntaxError(text, str(exc)) from exc
    return SemanticVersion.from_semver(version)


_ORDERING = {-1: Comparison.LESS, 0: Comparison.EQUAL, 1: Comparison.GREATER}


def compare(a: SemanticVersion, b: SemanticVersion) -> Comparison:
    """Order two versions by semantic-versioning precedence."""
    return _ORDERING[a.to_semver().compare(b.to_semver())]
