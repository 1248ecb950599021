"""Habit validation errors."""


class HabitError(Exception):
    """Base error for habits that cannot be scheduled."""

    def __init__(self, message: str, title: str | None = None):
        self.message = message
        self.title = title
        super().__init__(f"{title}: {message}" if title else message)


class MissingScheduleError(HabitError):
    """Habit has no scheduled date."""


class InvalidScheduleError(HabitError):
    """Repeater, repeat lengths or weekday set are unusable."""


class InvalidDurationError(HabitError):
    """Duration token does not match <digits><unit>."""
