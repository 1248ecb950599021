"""Pure weekday arithmetic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator

MONDAY = 1
SUNDAY = 7

WEEKDAY_NAMES = {1: "Mon", 2: "Tue", 3: "Wed", 4: "Thu", 5: "Fri", 6: "Sat", 7: "Sun"}


def weekday_increment(wd: int, delta: int) -> int:
    """Shift a weekday (1=Monday .. 7=Sunday) by delta days."""
    return (wd - 1 + delta) % 7 + 1


@dataclass(frozen=True)
class WeekdaySet:
    """Non-empty set of weekdays on which a habit may occur."""

    days: frozenset[int]

    def __post_init__(self):
        if not self.days:
            raise ValueError("WeekdaySet must contain at least one weekday")
        bad = [d for d in self.days if not MONDAY <= d <= SUNDAY]
        if bad:
            raise ValueError(f"Weekdays must be within 1..7, got {sorted(bad)}")

    @classmethod
    def of(cls, days: Iterable[int]) -> "WeekdaySet":
        return cls(frozenset(days))

    def __contains__(self, wd: object) -> bool:
        return wd in self.days

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.days))

    def __len__(self) -> int:
        return len(self.days)

    @property
    def is_unconstrained(self) -> bool:
        return len(self.days) == 7

    def format(self) -> str:
        """Space-separated form, e.g. "1 2 3 4 5"."""
        return " ".join(str(d) for d in self)


ALL_WEEKDAYS = WeekdaySet(frozenset(range(MONDAY, SUNDAY + 1)))


@dataclass(frozen=True)
class CalendarDay:
    """
    A day number paired with its weekday.

    Day numbers count days from a fixed epoch. Instances built with
    from_date() use the proleptic Gregorian ordinal, so to_date() round-trips.
    Derive new days with shift() so the weekday stays in step.
    """

    day_number: int
    weekday: int

    def __post_init__(self):
        if not MONDAY <= self.weekday <= SUNDAY:
            raise ValueError(f"Weekday must be within 1..7, got {self.weekday}")

    @classmethod
    def from_date(cls, d: date) -> "CalendarDay":
        return cls(day_number=d.toordinal(), weekday=d.isoweekday())

    def to_date(self) -> date:
        return date.fromordinal(self.day_number)

    def shift(self, days: int) -> "CalendarDay":
        """Plain calendar-day addition."""
        return CalendarDay(self.day_number + days, weekday_increment(self.weekday, days))

    def __sub__(self, other: "CalendarDay") -> int:
        return self.day_number - other.day_number


def lacking_weekdays(wd: int, delta: int, weekday_set: WeekdaySet) -> int:
    """
    Count the disallowed weekdays on a walk of |delta| days starting at wd.

    The walk runs in the direction of delta's sign and covers both the
    departure and the landing weekday.
    """
    step = -1 if delta < 0 else 1
    lack = 0
    for i in range(abs(delta) + 1):
        if weekday_increment(wd, i * step) not in weekday_set:
            lack += 1
    return lack


def advance_to_allowed_day(day: CalendarDay, raw_delta: int, weekday_set: WeekdaySet) -> CalendarDay:
    """
    Add raw_delta days to day, then push forward onto an allowed weekday.

    The landing day is first inflated by the number of disallowed weekdays
    crossed, then moved one day at a time until its weekday is allowed.
    With all seven weekdays allowed this is plain addition.
    """
    tentative = day.shift(raw_delta)
    lack = lacking_weekdays(day.weekday, raw_delta, weekday_set)
    tentative = tentative.shift(lack)
    while tentative.weekday not in weekday_set:
        tentative = tentative.shift(1)
    return tentative
