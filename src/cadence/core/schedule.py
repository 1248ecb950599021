"""Effective deadline projection for habits."""

from .habit import HabitRecord
from .weekdays import CalendarDay, advance_to_allowed_day


def effective_deadline(habit: HabitRecord) -> CalendarDay:
    """
    The day by which the current occurrence must be done.

    An explicit deadline wins. Otherwise a deadline repeat places it that many
    extra days after the schedule, on an allowed weekday. With neither, the
    deadline is the scheduled day itself.
    """
    if habit.deadline is not None:
        return habit.deadline
    if habit.deadline_repeat_days is not None:
        return advance_to_allowed_day(
            habit.scheduled,
            habit.deadline_repeat_days - habit.scheduled_repeat_days,
            habit.weekday_set,
        )
    return habit.scheduled


def effective_deadline_repeat(habit: HabitRecord) -> int:
    if habit.deadline_repeat_days is not None:
        return habit.deadline_repeat_days
    return habit.scheduled_repeat_days
