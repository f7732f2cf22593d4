"""Conversion between ``HH:MM`` strings and minutes since midnight.

Times of day and usage durations are plain integers counting minutes.
"""

import re

_TIME_RE = re.compile(r"(\d+):(\d+)")


def parse_time(text: str) -> int:
    """Return the number of minutes that an ``HH:MM`` string denotes."""
    match = _TIME_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"malformed time: {text!r}")
    hours, minutes = (int(part) for part in match.groups())
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Render a number of minutes as zero-padded ``HH:MM``."""
    hours, rest = divmod(abs(minutes), 60)
    return f"{hours:02d}:{rest:02d}"