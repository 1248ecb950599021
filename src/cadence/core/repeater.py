"""Parsing of repeater and weekday strings into typed values."""

import math
import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidDurationError, InvalidScheduleError
from .weekdays import ALL_WEEKDAYS, WeekdaySet

# Day equivalents per unit; months and years are averaged.
UNIT_DAYS = {"d": 1, "w": 7, "m": 30.4, "y": 365.25}

_DURATION_PATTERN = re.compile(r"^(\d+)([dwmy])$")
_REPEATER_PATTERN = re.compile(r"^(\.\+|\+\+|\+)(\S+)$")


class RepeaterType(Enum):
    """How a completion moves the next scheduled date."""

    FIXED = ".+"  # From the completion date
    ACCUMULATING = "+"  # From the original schedule, one period per completion
    CATCH_UP = "++"  # Like ACCUMULATING, skipping missed periods


@dataclass(frozen=True)
class Repeater:
    """A parsed repeater such as ".+2d/4d"."""

    repeater_type: RepeaterType
    scheduled_days: int
    deadline_days: int | None = None

    def format(self) -> str:
        text = f"{self.repeater_type.value}{self.scheduled_days}d"
        if self.deadline_days is not None:
            text += f"/{self.deadline_days}d"
        return text


def parse_duration(token: str, title: str | None = None) -> int:
    """
    Convert a duration like "3d", "2w", "1m" or "1y" to whole days.

    The count is multiplied by the unit's day equivalent and floored.
    """
    match = _DURATION_PATTERN.match(token.strip().lower())
    if not match:
        raise InvalidDurationError(f"Invalid duration {token!r}", title)
    num, unit = match.groups()
    return math.floor(int(num) * UNIT_DAYS[unit])


def parse_repeater(text: str | None, title: str | None = None) -> Repeater:
    """
    Parse "<type><N><unit>[/<M><unit>]" into a Repeater.

    Raises InvalidScheduleError for a missing or malformed repeater and
    InvalidDurationError for a bad duration token.
    """
    if not text or not text.strip():
        raise InvalidScheduleError("Habit has no repeater", title)

    match = _REPEATER_PATTERN.match(text.strip())
    if not match:
        raise InvalidScheduleError(f"Unparseable repeater {text!r}", title)

    prefix, durations = match.groups()
    parts = durations.split("/")
    if len(parts) > 2:
        raise InvalidScheduleError(f"Unparseable repeater {text!r}", title)

    scheduled_days = parse_duration(parts[0], title)
    deadline_days = parse_duration(parts[1], title) if len(parts) == 2 else None
    return Repeater(RepeaterType(prefix), scheduled_days, deadline_days)


def parse_weekday_set(text: str | None, title: str | None = None) -> WeekdaySet:
    """Parse a space-separated weekday list such as "1 2 3 4 5". Absent means all seven."""
    if text is None or not text.strip():
        return ALL_WEEKDAYS

    days = set()
    for token in text.split():
        if not token.isdigit() or not 1 <= int(token) <= 7:
            raise InvalidScheduleError(f"Invalid weekday {token!r} in {text!r}", title)
        days.add(int(token))
    return WeekdaySet(frozenset(days))
