"""Reschedule targets for weekday-constrained habits - no I/O dependencies."""

from dataclasses import dataclass
from typing import NamedTuple

from .habit import HabitRecord
from .repeater import RepeaterType
from .weekdays import CalendarDay, WeekdaySet, lacking_weekdays, weekday_increment


class RescheduleTarget(NamedTuple):
    """Where a repeat lands, and how many days were added to get there."""

    weekday: int
    extra_days: int


def next_allowed_weekday(current_weekday: int, raw_increment_days: int, weekday_set: WeekdaySet) -> RescheduleTarget:
    """
    First allowed weekday reached by repeating raw_increment_days from current_weekday.

    Disallowed weekdays crossed on the way are added on top of the raw
    increment. A disallowed starting weekday is not a valid occurrence and
    does not count as crossed.
    """
    extra = lacking_weekdays(current_weekday, raw_increment_days, weekday_set)
    if current_weekday not in weekday_set:
        extra -= 1

    weekday = weekday_increment(current_weekday, raw_increment_days + extra)
    while weekday not in weekday_set:
        extra += 1
        weekday = weekday_increment(weekday, 1)
    return RescheduleTarget(weekday, extra)


def reschedule(day: CalendarDay, raw_increment_days: int, weekday_set: WeekdaySet) -> CalendarDay:
    """Apply a raw repeat to a concrete day, landing on an allowed weekday."""
    target = next_allowed_weekday(day.weekday, raw_increment_days, weekday_set)
    return day.shift(raw_increment_days + target.extra_days)


def next_scheduled(habit: HabitRecord, completed_on: CalendarDay) -> CalendarDay:
    """
    Scheduled day of the next occurrence after completing a habit.

    FIXED repeats from the completion day, ACCUMULATING from the current
    schedule, CATCH_UP from the current schedule until it passes the
    completion day.
    """
    s = habit.scheduled_repeat_days
    if habit.repeater_type is RepeaterType.FIXED:
        return reschedule(completed_on, s, habit.weekday_set)

    nxt = reschedule(habit.scheduled, s, habit.weekday_set)
    if habit.repeater_type is RepeaterType.CATCH_UP:
        while nxt.day_number <= completed_on.day_number:
            nxt = reschedule(nxt, s, habit.weekday_set)
    return nxt


class StateChange(NamedTuple):
    """A todo state transition, reduced to done/not-done."""

    was_done: bool
    is_done: bool


@dataclass
class TransitionWindow:
    """
    The last two state changes of one item, owned by the caller's session.

    Repeating items are marked done and immediately flipped back to a todo
    state; completes_repeat() recognises that pair so the caller knows to
    move the schedule onto an allowed weekday.
    """

    previous: StateChange | None = None
    current: StateChange | None = None

    def push(self, change: StateChange) -> None:
        self.previous, self.current = self.current, change

    def completes_repeat(self) -> bool:
        if self.previous is None or self.current is None:
            return False
        return (
            not self.previous.was_done
            and self.previous.is_done
            and self.current.was_done
            and not self.current.is_done
        )

    def clear(self) -> None:
        self.previous = None
        self.current = None
