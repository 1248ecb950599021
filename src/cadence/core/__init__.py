"""Functional core - pure habit scheduling logic with no I/O."""

from .weekdays import (
    ALL_WEEKDAYS,
    CalendarDay,
    WeekdaySet,
    advance_to_allowed_day,
    lacking_weekdays,
    weekday_increment,
)
from .errors import HabitError, InvalidDurationError, InvalidScheduleError, MissingScheduleError
from .repeater import Repeater, RepeaterType, parse_duration, parse_repeater, parse_weekday_set
from .habit import HabitRecord
from .schedule import effective_deadline, effective_deadline_repeat
from .priority import priority, sort_by_priority
from .status import Face, Status, classify
from .graph import Cell, Glyph, build_graph
from .reschedule import (
    RescheduleTarget,
    StateChange,
    TransitionWindow,
    next_allowed_weekday,
    next_scheduled,
    reschedule,
)
from .agenda import AgendaRow, assemble_agenda, graph_window, is_due

__all__ = [
    # Weekdays
    "ALL_WEEKDAYS",
    "CalendarDay",
    "WeekdaySet",
    "advance_to_allowed_day",
    "lacking_weekdays",
    "weekday_increment",
    # Errors
    "HabitError",
    "InvalidDurationError",
    "InvalidScheduleError",
    "MissingScheduleError",
    # Habits
    "HabitRecord",
    "Repeater",
    "RepeaterType",
    "parse_duration",
    "parse_repeater",
    "parse_weekday_set",
    # Scheduling
    "effective_deadline",
    "effective_deadline_repeat",
    "priority",
    "sort_by_priority",
    # Graph
    "Face",
    "Status",
    "classify",
    "Cell",
    "Glyph",
    "build_graph",
    # Reschedule
    "RescheduleTarget",
    "StateChange",
    "TransitionWindow",
    "next_allowed_weekday",
    "next_scheduled",
    "reschedule",
    # Agenda
    "AgendaRow",
    "assemble_agenda",
    "graph_window",
    "is_due",
]
