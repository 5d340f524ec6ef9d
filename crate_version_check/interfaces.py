"""
Interfaces for the transport and output collaborators.
"""

from __future__ import annotations

from typing import Optional, Protocol


class Fetcher(Protocol):
    """Fetch the raw registry response for a package."""

    def fetch(self, package_name: str) -> str:
        ...


class OutputSink(Protocol):
    """Accept a rendered line of text and its line terminator."""

    def write(self, text: str, style: Optional[str] = None) -> None:
        ...

    def newline(self) -> None:
        ...


class Terminal(Protocol):
    """Terminal capabilities needed to rewrite the current line in place.

    ``is_interactive`` is false when cursor control is unavailable, e.g. when
    output is redirected to a file.
    """

    is_interactive: bool

    def move_to_line_start(self) -> None:
        ...

    def clear_to_line_end(self) -> None:
        ...

    def write(self, text: str, style: Optional[str] = None) -> None:
        ...

    def flush(self) -> None:
        ...
