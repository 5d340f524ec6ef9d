"""
Error taxonomy for version queries.

- ParseFailure: the registry response had no extractable ``max_version`` field
- VersionSyntaxError: a supplied or extracted string is not a semantic version
- RequestFailure: the request to the registry failed at the transport level
"""

from __future__ import annotations

from typing import Optional


class QueryError(Exception):
    """Base class for every failure of a version query."""


class ParseFailure(QueryError):
    """Response text did not contain the ``max_version`` field."""

    def __init__(self, message: str = "response has no max_version field") -> None:
        super().__init__(message)


class VersionSyntaxError(QueryError, ValueError):
    """Text is not a valid ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` version."""

    def __init__(self, text: str, reason: Optional[str] = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Invalid semantic version: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RequestFailure(QueryError):
    """Transport failure talking to the registry.

    The underlying exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")
