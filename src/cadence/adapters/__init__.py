"""Adapters - I/O implementations of ports."""

from .json_habits import HabitNotFoundError, JsonHabitFile

__all__ = [
    "HabitNotFoundError",
    "JsonHabitFile",
]
