"""
Render version check results for people.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from .errors import QueryError
from .interfaces import OutputSink, Terminal
from .models import Status, StatusKind
from .pipeline import VersionQuery, query


logger = logging.getLogger(__name__)

CHECKING_MESSAGE = "Checking for later version..."

STATUS_STYLES = {
    StatusKind.EQUAL: "bright_green",
    StatusKind.BEHIND: "bright_red",
    StatusKind.AHEAD: "bright_magenta",
}
FAILURE_STYLE = "bright_yellow"
PROGRESS_STYLE = "bright_yellow"


@dataclass(frozen=True)
class Message:
    text: str
    style: Optional[str] = None


def render(
    package_name: str,
    current_version: str,
    outcome: Union[Status, QueryError],
) -> Message:
    """Turn a query outcome into a single line of text."""
    if isinstance(outcome, QueryError):
        return Message(f"Failed to query the registry for {package_name}", FAILURE_STYLE)

    style = STATUS_STYLES[outcome.kind]
    if outcome.kind is StatusKind.EQUAL:
        text = f"Running the latest {package_name} version {outcome.version}"
    elif outcome.kind is StatusKind.BEHIND:
        text = (
            f"The current {package_name} version {current_version} is old, "
            f"please update to {outcome.version}"
        )
    else:
        text = (
            f"The current {package_name} version {current_version} is ahead "
            f"of the registry version {outcome.version}"
        )
    return Message(text, style)


class StreamSink(OutputSink):
    """Write plain lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.stream.write(text)

    def newline(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


class TerminalSink(OutputSink):
    """Replace the current terminal line with each write."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.terminal.move_to_line_start()
        self.terminal.clear_to_line_end()
        self.terminal.write(text, style)

    def newline(self) -> None:
        self.terminal.write("\n")
        self.terminal.flush()


class RichTerminal(Terminal):
    """Terminal capabilities backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()

    @property
    def is_interactive(self) -> bool:
        return self.console.is_terminal

    def move_to_line_start(self) -> None:
        self.console.control(Control(ControlType.CARRIAGE_RETURN))

    def clear_to_line_end(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 0)))

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, end="", markup=False, highlight=False)

    def flush(self) -> None:
        self.console.file.flush()


def output(
    package_name: str,
    current_version: str,
    sink: Optional[OutputSink] = None,
    pipeline: Optional[VersionQuery] = None,
) -> None:
    """Query and compare the package version, writing the status to ``sink``.

    Query failures are rendered as a generic failure line and never raised.
    Errors raised by the sink itself propagate. Without a sink the status is
    written to the console.
    """
    if sink is None:
        output_with_term(package_name, current_version, RichTerminal(), pipeline=pipeline)
        return

    try:
        if pipeline is None:
            outcome: Union[Status, QueryError] = query(package_name, current_version)
        else:
            outcome = pipeline.query(package_name, current_version)
    except QueryError as e:
        logger.debug("Version query for %s failed: %s", package_name, e, exc_info=True)
        outcome = e

    message = render(package_name, current_version, outcome)
    sink.write(message.text, message.style)
    sink.newline()


def output_with_term(
    package_name: str,
    current_version: str,
    terminal: Terminal,
    pipeline: Optional[VersionQuery] = None,
) -> None:
    """Show a progress line on ``terminal`` and overwrite it with the status.

    Without cursor control the progress line is skipped.
    """
    if terminal.is_interactive:
        terminal.write(CHECKING_MESSAGE, PROGRESS_STYLE)
        terminal.flush()
    output(package_name, current_version, TerminalSink(terminal), pipeline=pipeline)


def output_to_writer(
    package_name: str,
    current_version: str,
    stream: TextIO,
    pipeline: Optional[VersionQuery] = None,
) -> None:
    """Write the status as one plain line to ``stream``."""
    output(package_name, current_version, StreamSink(stream), pipeline=pipeline)
