"""Per-day habit status classification."""

from dataclasses import dataclass
from enum import Enum

from .habit import HabitRecord
from .schedule import effective_deadline, effective_deadline_repeat
from .weekdays import CalendarDay, advance_to_allowed_day


class Status(Enum):
    """Status of a habit on one day."""

    CLEAR = "clear"  # Not yet scheduled
    READY = "ready"  # Scheduled, deadline still ahead
    ALERT = "alert"  # Deadline day
    OVERDUE = "overdue"  # Past the deadline


@dataclass(frozen=True)
class Face:
    """A status drawn at present (full) or future (dimmed) intensity."""

    status: Status
    future: bool = False

    @property
    def name(self) -> str:
        return f"{self.status.value}-future" if self.future else self.status.value


def faces(status: Status) -> tuple[Face, Face]:
    """(present, future) variants of a status."""
    return Face(status), Face(status, future=True)


def classify(
    habit: HabitRecord,
    day: CalendarDay,
    scheduled_override: CalendarDay | None = None,
    done_on_day: bool = False,
    skip: bool = False,
    *,
    done_always_green: bool = False,
) -> tuple[Face, Face]:
    """
    Classify a habit on a given day.

    scheduled_override replaces the record's schedule with the one that was
    in force on that day; its deadline is then derived from the repeat
    lengths rather than the record's own deadline.

    Returns: (present_face, future_face)
    """
    if scheduled_override is not None:
        scheduled = scheduled_override
        deadline = advance_to_allowed_day(
            scheduled,
            effective_deadline_repeat(habit) - habit.scheduled_repeat_days,
            habit.weekday_set,
        )
    else:
        scheduled = habit.scheduled
        deadline = effective_deadline(habit)

    if skip or day.day_number < scheduled.day_number:
        if scheduled_override is None and done_on_day:
            return faces(Status.READY)
        return faces(Status.CLEAR)
    if day.day_number < deadline.day_number:
        return faces(Status.READY)
    if day.day_number == deadline.day_number:
        return faces(Status.READY if done_on_day else Status.ALERT)
    if done_always_green and done_on_day:
        return faces(Status.READY)
    return faces(Status.OVERDUE)
