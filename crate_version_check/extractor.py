"""
Pull the latest version out of a registry response.
"""

from __future__ import annotations

from itertools import dropwhile, islice

from .errors import ParseFailure


FIELD_NAME = "max_version"


def extract(raw_text: str) -> str:
    """Return the raw ``max_version`` value from a registry response.

    The text is split on double quotes rather than parsed as JSON, so
    ``"max_version":"0.4.2"`` splits into ``[max_version, :, 0.4.2]`` and the
    value is the second token after the field name. JSON escape sequences in
    the value are returned verbatim.

    Raises:
        ParseFailure: if the field is missing or has no value after it.
    """
    tokens = dropwhile(lambda token: token != FIELD_NAME, raw_text.split('"'))
    value = next(islice(tokens, 2, None), None)
    if value is None:
        raise ParseFailure(f"no {FIELD_NAME} value in response")
    return value
