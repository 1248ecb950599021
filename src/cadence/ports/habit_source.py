"""Habit source interface."""

from datetime import date
from typing import Protocol

from cadence.core.habit import HabitRecord


class HabitSource(Protocol):
    """Interface for loading habits from any backend."""

    def fetch_habits(self) -> list[HabitRecord]:
        """Fetch all habits as validated records."""
        ...

    def fetch_habit(self, title: str) -> HabitRecord:
        """Fetch one habit by title. Raises LookupError when absent."""
        ...

    def record_done(self, title: str, done_on: date) -> HabitRecord:
        """Record a completion and move the habit to its next scheduled day."""
        ...
