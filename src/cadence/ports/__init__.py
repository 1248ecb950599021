"""Ports - interfaces/protocols for external dependencies."""

from .habit_source import HabitSource

__all__ = [
    "HabitSource",
]
