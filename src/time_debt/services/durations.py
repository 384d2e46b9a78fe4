"""Human-readable durations."""

import re
from datetime import timedelta

_DURATION_PATTERN = re.compile(r"^(-)?(\d+):([0-5]\d)(?::([0-5]\d))?$")


def hours_minutes_seconds(duration: timedelta) -> tuple[int, int, int]:
    """Split the absolute value of a duration into whole hours, minutes, seconds."""
    total_seconds = int(abs(duration).total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``H:MM:SS``, with a leading ``-`` when negative."""
    sign = "-" if duration < timedelta(0) else ""
    hours, minutes, seconds = hours_minutes_seconds(duration)
    return f"{sign}{hours}:{minutes:02}:{seconds:02}"


def parse_duration(text: str) -> timedelta:
    """Parse ``H:MM`` or ``H:MM:SS`` (optionally negative) into a duration."""
    match = _DURATION_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid duration: {text!r}")
    sign, hours, minutes, seconds = match.groups()
    duration = timedelta(
        hours=int(hours), minutes=int(minutes), seconds=int(seconds or 0)
    )
    return -duration if sign else duration
