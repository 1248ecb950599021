"""Pure habit urgency scoring - no I/O dependencies."""

from .habit import HabitRecord
from .schedule import effective_deadline
from .weekdays import CalendarDay


def priority(habit: HabitRecord, reference_day: CalendarDay) -> int:
    """
    Urgency score of a habit as of reference_day. Higher is more urgent.

    Grows 10 per day past the schedule, gets a one-off bump of 50 on a
    deadline distinct from the schedule, and grows 100 per day once the
    deadline has passed.
    """
    base = 1000
    base += 10 * (reference_day - habit.scheduled)

    deadline = effective_deadline(habit)
    if deadline.day_number != habit.scheduled.day_number and reference_day.day_number == deadline.day_number:
        base += 50

    slip = reference_day.day_number - (deadline.day_number - 1)
    if slip > 0:
        base += 100 * slip
    else:
        base += 10 * slip
    return base


def sort_by_priority(habits: list[HabitRecord], reference_day: CalendarDay) -> list[HabitRecord]:
    """
    Sort habits by priority (descending) then title (ascending).

    Pure function - no I/O.
    """
    return sorted(habits, key=lambda h: (-priority(h, reference_day), h.title))
