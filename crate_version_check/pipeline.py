"""
Query the registry and compare against a current version.
"""

from __future__ import annotations

import logging
from typing import Optional

from .client import RegistryClient
from .comparator import classify
from .extractor import extract
from .interfaces import Fetcher
from .models import Status
from .versioning import SemanticVersion, parse


logger = logging.getLogger(__name__)


class VersionQuery:
    """Fetch, extract and parse the registry version of a package."""

    def __init__(self, client: Optional[Fetcher] = None) -> None:
        self.client = client if client is not None else RegistryClient()

    def get(self, package_name: str) -> SemanticVersion:
        """Return the latest version of ``package_name`` on the registry.

        Raises:
            RequestFailure: the request could not be made or completed.
            ParseFailure: the response has no ``max_version`` field.
            VersionSyntaxError: the extracted value is not a semantic version.
        """
        raw_text = self.client.fetch(package_name)
        version_text = extract(raw_text)
        logger.debug("Extracted max_version %r for %s", version_text, package_name)
        return parse(version_text)

    def query(self, package_name: str, current_version: str) -> Status:
        """Compare ``current_version`` with the registry version of ``package_name``.

        The current version is parsed before any request is made, so an
        invalid one raises VersionSyntaxError without touching the network.
        """
        current = parse(current_version)
        registry = self.get(package_name)
        status = classify(current, registry)
        logger.debug(
            "%s %s is %s registry version %s",
            package_name, current, status.kind.value, registry,
        )
        return status


_DEFAULT_QUERY: Optional[VersionQuery] = None


def _default_query() -> VersionQuery:
    global _DEFAULT_QUERY
    if _DEFAULT_QUERY is None:
        _DEFAULT_QUERY = VersionQuery()
    return _DEFAULT_QUERY


def get(package_name: str) -> SemanticVersion:
    """Get the registry version using a shared query instance."""
    return _default_query().get(package_name)


def query(package_name: str, current_version: str) -> Status:
    """Query and compare using a shared query instance."""
    return _default_query().query(package_name, current_version)
