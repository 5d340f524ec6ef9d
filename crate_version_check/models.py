"""
Core data models for version checks.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .versioning import SemanticVersion


class Comparison(enum.Enum):
    """Outcome of ordering two versions."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


class StatusKind(enum.Enum):
    """Where the current version sits relative to the registry."""

    BEHIND = "behind"
    EQUAL = "equal"
    AHEAD = "ahead"


@dataclass(frozen=True)
class Status:
    """Comparative status of a version query.

    ``version`` is always the registry's version.
    """

    kind: StatusKind
    version: "SemanticVersion"

    @classmethod
    def behind(cls, version: "SemanticVersion") -> "Status":
        return cls(StatusKind.BEHIND, version)

    @classmethod
    def equal(cls, version: "SemanticVersion") -> "Status":
        return cls(StatusKind.EQUAL, version)

    @classmethod
    def ahead(cls, version: "SemanticVersion") -> "Status":
        return cls(StatusKind.AHEAD, version)

    @property
    def is_behind(self) -> bool:
        return self.kind is StatusKind.BEHIND
