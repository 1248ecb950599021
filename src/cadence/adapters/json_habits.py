"""JSON file habit storage adapter."""

import json
import logging
from datetime import date
from pathlib import Path

from cadence.core.errors import HabitError, InvalidScheduleError
from cadence.core.habit import HabitRecord
from cadence.core.reschedule import next_scheduled
from cadence.core.weekdays import CalendarDay

logger = logging.getLogger(__name__)


class HabitNotFoundError(LookupError):
    """No habit with the requested title."""


def _parse_date(value: str | None, title: str) -> date | None:
    """Parse an ISO date or datetime, keeping the date part."""
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).split("T")[0].split(" ")[0])
    except ValueError:
        raise InvalidScheduleError(f"Invalid date {value!r}", title) from None


def habit_from_entry(entry: dict) -> HabitRecord:
    """Create a HabitRecord from one JSON entry."""
    if not isinstance(entry, dict):
        raise InvalidScheduleError(f"Habit entry must be an object, got {type(entry).__name__}")
    title = entry.get("title", "")
    if not isinstance(title, str):
        raise InvalidScheduleError(f"Habit title must be a string, got {title!r}")
    done = entry.get("done") or []
    if not isinstance(done, list):
        raise InvalidScheduleError(f"Done dates must be a list, got {done!r}", title)
    for key in ("scheduled", "repeat", "weekdays", "deadline"):
        if entry.get(key) is not None and not isinstance(entry[key], str):
            raise InvalidScheduleError(f"{key} must be a string, got {entry[key]!r}", title)
    return HabitRecord.from_properties(
        title=title,
        scheduled=_parse_date(entry.get("scheduled"), title),
        repeater=entry.get("repeat"),
        weekdays=entry.get("weekdays"),
        deadline=_parse_date(entry.get("deadline"), title),
        done=[_parse_date(d, title) for d in done if d],
    )


def _matches(entry, title: str) -> bool:
    return isinstance(entry, dict) and str(entry.get("title", "")).lower() == title.lower()


class JsonHabitFile:
    """
    JSON file habit storage.

    Implements HabitSource protocol. The file holds a list of entries:
    {"title", "scheduled", "repeat", "weekdays", "deadline", "done"}.
    """

    def __init__(self, path: Path | str, strict: bool = False):
        self.path = Path(path).expanduser()
        self.strict = strict

    def _load(self) -> list[dict]:
        if not self.path.exists():
            logger.warning(f"Habits file not found: {self.path}")
            return []
        data = json.loads(self.path.read_text())
        if not isinstance(data, list):
            raise ValueError(f"Habits file must contain a JSON list: {self.path}")
        return data

    def _save(self, entries: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(entries, indent=2) + "\n")

    def fetch_habits(self) -> list[HabitRecord]:
        """Fetch all habits. Malformed entries are skipped unless strict."""
        habits = []
        for entry in self._load():
            try:
                habits.append(habit_from_entry(entry))
            except HabitError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping habit: {e}")
        return habits

    def fetch_habit(self, title: str) -> HabitRecord:
        """Fetch a single habit by title (case-insensitive)."""
        for entry in self._load():
            if _matches(entry, title):
                return habit_from_entry(entry)
        raise HabitNotFoundError(f"No habit titled {title!r}")

    def record_done(self, title: str, done_on: date) -> HabitRecord:
        """Append a completion and move the schedule to the next occurrence."""
        entries = self._load()
        for entry in entries:
            if not _matches(entry, title):
                continue

            habit = habit_from_entry(entry)
            nxt = next_scheduled(habit, CalendarDay.from_date(done_on)).to_date()
            shift = (nxt - habit.scheduled.to_date()).days

            entry.setdefault("done", []).append(done_on.isoformat())
            entry["scheduled"] = nxt.isoformat()
            if entry.get("deadline"):
                deadline = _parse_date(entry["deadline"], habit.title)
                entry["deadline"] = date.fromordinal(deadline.toordinal() + shift).isoformat()

            self._save(entries)
            logger.info(f"Rescheduled {habit.title!r} to {nxt.isoformat()}")
            return habit_from_entry(entry)

        raise HabitNotFoundError(f"No habit titled {title!r}")
