"""Pure habit domain model - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .errors import InvalidScheduleError, MissingScheduleError
from .repeater import RepeaterType, parse_repeater, parse_weekday_set
from .weekdays import ALL_WEEKDAYS, CalendarDay, WeekdaySet


@dataclass(frozen=True)
class HabitRecord:
    """
    Immutable snapshot of one recurring task.

    Built once per render or scoring request. Validation happens here and
    nowhere else; downstream functions assume a valid record.
    """

    title: str
    scheduled: CalendarDay
    scheduled_repeat_days: int
    repeater_type: RepeaterType = RepeaterType.FIXED
    deadline: CalendarDay | None = None
    deadline_repeat_days: int | None = None
    done_dates: tuple[CalendarDay, ...] = field(default_factory=tuple)
    weekday_set: WeekdaySet = ALL_WEEKDAYS

    def __post_init__(self):
        if self.scheduled is None:
            raise MissingScheduleError("Habit has no scheduled date", self.title)
        if self.scheduled_repeat_days <= 0:
            raise InvalidScheduleError(
                f"Scheduled repeat must be positive, got {self.scheduled_repeat_days}", self.title
            )
        if self.deadline_repeat_days is not None and self.deadline_repeat_days <= self.scheduled_repeat_days:
            raise InvalidScheduleError(
                f"Deadline repeat ({self.deadline_repeat_days}d) must exceed "
                f"scheduled repeat ({self.scheduled_repeat_days}d)",
                self.title,
            )
        # Frozen: assign the sorted copy through object.__setattr__
        object.__setattr__(
            self, "done_dates", tuple(sorted(self.done_dates, key=lambda d: d.day_number))
        )

    @property
    def last_done(self) -> CalendarDay | None:
        return self.done_dates[-1] if self.done_dates else None

    @classmethod
    def from_properties(
        cls,
        title: str,
        scheduled: date | None,
        repeater: str | None,
        weekdays: str | None = None,
        deadline: date | None = None,
        done: Iterable[date] = (),
    ) -> "HabitRecord":
        """Create a HabitRecord from parsed item properties."""
        if scheduled is None:
            raise MissingScheduleError("Habit has no scheduled date", title)
        rep = parse_repeater(repeater, title)
        return cls(
            title=title,
            scheduled=CalendarDay.from_date(scheduled),
            scheduled_repeat_days=rep.scheduled_days,
            repeater_type=rep.repeater_type,
            deadline=CalendarDay.from_date(deadline) if deadline else None,
            deadline_repeat_days=rep.deadline_days,
            done_dates=tuple(CalendarDay.from_date(d) for d in done),
            weekday_set=parse_weekday_set(weekdays, title),
        )
