"""Pure agenda assembly logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date

from .graph import Cell, build_graph
from .habit import HabitRecord
from .priority import priority
from .weekdays import CalendarDay


@dataclass
class AgendaRow:
    """A habit with its priority and consistency graph for one day."""

    habit: HabitRecord
    priority: int
    cells: list[Cell]


def is_due(habit: HabitRecord, today: CalendarDay) -> bool:
    """Scheduled today or earlier."""
    return habit.scheduled.day_number <= today.day_number


def graph_window(today: CalendarDay, preceding_days: int, following_days: int) -> tuple[CalendarDay, CalendarDay]:
    """(start, end) of a graph centred on today."""
    return today.shift(-preceding_days), today.shift(following_days)


def assemble_agenda(
    habits: list[HabitRecord],
    as_of: date | None = None,
    preceding_days: int = 21,
    following_days: int = 7,
    only_due: bool = True,
    done_always_green: bool = False,
) -> list[AgendaRow]:
    """
    Assemble agenda rows from habits.

    Pure function - no I/O. Handles filtering, graph building and sorting.
    """
    today = CalendarDay.from_date(as_of or date.today())
    start, end = graph_window(today, preceding_days, following_days)

    if only_due:
        habits = [h for h in habits if is_due(h, today)]

    rows = [
        AgendaRow(
            habit=h,
            priority=priority(h, today),
            cells=build_graph(h, start, today, end, done_always_green=done_always_green),
        )
        for h in habits
    ]
    return sorted(rows, key=lambda r: (-r.priority, r.habit.title))
