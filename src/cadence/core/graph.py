"""Consistency graph construction - pure, no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .habit import HabitRecord
from .repeater import RepeaterType
from .status import Face, Status, classify
from .weekdays import ALL_WEEKDAYS, WEEKDAY_NAMES, CalendarDay, advance_to_allowed_day

_MAX_DAY_NUMBER = date.max.toordinal()


class Glyph(Enum):
    """What is drawn in a graph cell."""

    DONE = "done"
    TODAY = "today"
    BLANK = "blank"


@dataclass(frozen=True)
class Cell:
    """One day of a consistency graph."""

    day: CalendarDay
    glyph: Glyph
    face: Face

    @property
    def status(self) -> Status:
        return self.face.status

    @property
    def tooltip(self) -> str | None:
        """Date of the cell, e.g. "2025-01-15 Wed DONE"."""
        if not 1 <= self.day.day_number <= _MAX_DAY_NUMBER:
            return None
        text = f"{self.day.to_date().isoformat()} {WEEKDAY_NAMES[self.day.weekday]}"
        if self.glyph is Glyph.DONE:
            text += " DONE"
        return text


class _Projection:
    """Reconstructs the scheduled day that was in force on a past day."""

    def __init__(self, habit: HabitRecord):
        self.habit = habit

    def scheduled_as_of(self, day: CalendarDay, last_done: CalendarDay, remaining: int) -> CalendarDay:
        raise NotImplementedError

    def completed(self, day: CalendarDay) -> None:
        pass


class _FixedProjection(_Projection):
    def scheduled_as_of(self, day, last_done, remaining):
        return advance_to_allowed_day(last_done, self.habit.scheduled_repeat_days, self.habit.weekday_set)


class _AccumulatingProjection(_Projection):
    def scheduled_as_of(self, day, last_done, remaining):
        # Each completion still ahead pushed the schedule forward one period.
        return advance_to_allowed_day(
            self.habit.scheduled,
            -(remaining * self.habit.scheduled_repeat_days),
            self.habit.weekday_set,
        )


class _CatchUpProjection(_Projection):
    """
    Running anchor/offset approximation of "++" scheduling.

    The offset is seeded from the last completion, then moves forward one
    period for every full period that passes beyond the projected day, until
    the next completion reseeds it. This drifts from an exact replay when a
    period is missed: the missed days read as freshly scheduled rather than
    overdue, so the projection can lead the true schedule by whole periods.
    """

    def __init__(self, habit: HabitRecord):
        super().__init__(habit)
        self.incr: int | None = None
        self.bump_at = 0

    def _seed(self, last_done: CalendarDay) -> None:
        s = self.habit.scheduled_repeat_days
        if s == 1:
            self.incr = 1 + (last_done - self.habit.scheduled)
        else:
            periods = (self.habit.scheduled - last_done - 1) // s
            self.incr = -(periods * s)
        self.bump_at = self.habit.scheduled.day_number + self.incr + s

    def scheduled_as_of(self, day, last_done, remaining):
        s = self.habit.scheduled_repeat_days
        if self.incr is None:
            self._seed(last_done)
        while day.day_number >= self.bump_at:
            self.incr += s
            self.bump_at += s
        return advance_to_allowed_day(self.habit.scheduled, self.incr, ALL_WEEKDAYS)

    def completed(self, day):
        self._seed(day)


def _distinct_days(done_dates: tuple[CalendarDay, ...]) -> list[CalendarDay]:
    """Sorted completions with same-day duplicates collapsed."""
    days = []
    for done in done_dates:
        if not days or done.day_number != days[-1].day_number:
            days.append(done)
    return days


_PROJECTIONS = {
    RepeaterType.FIXED: _FixedProjection,
    RepeaterType.ACCUMULATING: _AccumulatingProjection,
    RepeaterType.CATCH_UP: _CatchUpProjection,
}


def build_graph(
    habit: HabitRecord,
    start: CalendarDay,
    now: CalendarDay,
    end: CalendarDay,
    *,
    done_always_green: bool = False,
) -> list[Cell]:
    """
    Build the consistency graph of a habit for the window [start, end].

    Every calendar day in the window gets exactly one cell, whatever the
    habit's weekday set. Days before now show history, days after now the
    forecast.

    Pure function - no I/O.
    """
    if end.day_number < start.day_number:
        raise ValueError(f"Graph window ends ({end.day_number}) before it starts ({start.day_number})")

    done_dates = _distinct_days(habit.done_dates)
    cursor = 0
    last_done = None

    # Completions before the window only seed the walk.
    while cursor < len(done_dates) and done_dates[cursor].day_number < start.day_number:
        last_done = done_dates[cursor]
        cursor += 1

    projection = _PROJECTIONS[habit.repeater_type](habit)
    cells = []
    day = start

    for _ in range(end - start + 1):
        in_the_past = day.day_number < now.day_number
        today = day.day_number == now.day_number
        skipped = day.weekday not in habit.weekday_set
        done = cursor < len(done_dates) and done_dates[cursor].day_number == day.day_number

        as_of = None
        remaining = len(done_dates) - cursor
        if in_the_past and last_done is not None and remaining:
            as_of = projection.scheduled_as_of(day, last_done, remaining)

        present, future = classify(
            habit, day, as_of, done, skipped, done_always_green=done_always_green
        )

        if done:
            glyph = Glyph.DONE
            cursor += 1
            last_done = day
            projection.completed(day)
        elif today:
            glyph = Glyph.TODAY
        else:
            glyph = Glyph.BLANK

        face = present if (in_the_past or today) else future
        # Past days that were neither missed nor done are dimmed.
        if in_the_past and face.status is not Status.OVERDUE and not done:
            face = future

        cells.append(Cell(day=day, glyph=glyph, face=face))
        day = day.shift(1)

    return cells
