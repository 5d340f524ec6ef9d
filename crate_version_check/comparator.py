"""
Classify a current version against the registry's version.
"""

from __future__ import annotations

from .models import Comparison, Status
from .versioning import SemanticVersion, compare


def classify(current: SemanticVersion, registry: SemanticVersion) -> Status:
    """Map ``compare(current, registry)`` to a Status carrying the registry version."""
    ordering = compare(current, registry)
    if ordering is Comparison.LESS:
        return Status.behind(registry)
    if ordering is Comparison.GREATER:
        return Status.ahead(registry)
    return Status.equal(registry)
