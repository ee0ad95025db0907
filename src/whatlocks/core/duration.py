"""Compact rendering of lock durations."""

import re
from dataclasses import dataclass
from typing import Sequence

from whatlocks.core.exceptions import InvalidDurationError
from whatlocks.utils.markup import Markup

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

# Leading zero fields together with their unit letters and separators
_SUPERFLUOUS = re.compile(r"^[0, dhm]*")

# The final seconds digit and its unit are always shown
_MIN_VALUABLE = 2


@dataclass(frozen=True)
class DurationRendering:
    """A rendered duration and the length of its redundant prefix."""

    superfluous_length: int
    text: str
    plain: str


def split_duration(duration: int) -> tuple[int, int, int, int]:
    """Break seconds down into (days, hours, minutes, seconds)."""
    days, rest = divmod(duration, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return days, hours, minutes, seconds


def plain_duration(duration: int) -> str:
    """
    Fixed-width rendering, e.g. 90061 -> "001d, 01h 01m 01s".

    Raises:
        InvalidDurationError: If duration is negative
    """
    if duration < 0:
        raise InvalidDurationError(duration)
    days, hours, minutes, seconds = split_duration(duration)
    return f"{days:03d}d, {hours:02d}h {minutes:02d}m {seconds:02d}s"


def superfluous_length(short: str) -> int:
    """Length of the all-zero prefix of a plain duration string."""
    match = _SUPERFLUOUS.match(short)
    length = match.end() if match else 0
    return max(0, min(length, len(short) - _MIN_VALUABLE))


class DurationFormatter:
    """Renders durations with their leading zero fields de-emphasized."""

    def __init__(self, markup: Markup):
        self.markup = markup

    def format(self, duration: int, cut_away: int = 0) -> DurationRendering:
        """
        Render a duration.

        Args:
            duration: Lock duration in seconds
            cut_away: Number of leading characters to drop entirely, usually
                the superfluous length of the longest duration in a listing

        Returns:
            DurationRendering with the superfluous prefix length of this
            duration and the marked-up text

        Raises:
            InvalidDurationError: If duration is negative
        """
        short = plain_duration(duration)
        superfluous = superfluous_length(short)
        start = min(max(cut_away, 0), superfluous)
        text = self.markup.dim(short[start:superfluous]) + short[superfluous:]
        return DurationRendering(superfluous, text, short)

    def format_many(self, durations: Sequence[int]) -> list[str]:
        """
        Render a batch of durations aligned to the longest one.

        The prefix the longest duration does not need is cut from every entry.
        """
        if not durations:
            return []
        longest = self.format(max(durations)).superfluous_length
        return [self.format(duration, longest).text for duration in durations]
