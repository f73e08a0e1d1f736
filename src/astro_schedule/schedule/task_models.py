# src/astro_schedule/schedule/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass

# Zero-padded 24-hour "HH:mm".
TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


class ScheduleError(Exception):
    """Base class for errors raised by the schedule subsystem."""


class InvalidTimeError(ScheduleError, ValueError):
    """Raised in strict mode for malformed or inverted time ranges."""


@dataclass(slots=True)
class Task:
    """
    A scheduled activity.

    start/end are kept as the raw "HH:mm" strings the user typed and are
    compared lexicographically, never parsed.
    """

    title: str
    start: str
    end: str
    priority: str
    completed: bool = False

    def overlaps(self, other: Task) -> bool:
        # Half-open intervals: touching endpoints do not overlap.
        return self.start < other.end and other.start < self.end

    def update(self, title: str, start: str, end: str, priority: str) -> None:
        self.title = title
        self.start = start
        self.end = end
        self.priority = priority

    def mark_complete(self) -> None:
        self.completed = True

    def matches(self, title: str) -> bool:
        return self.title.lower() == title.lower()

    def __str__(self) -> str:
        mark = "✓" if self.completed else ""
        return f"{self.start}-{self.end} | {self.title} [{self.priority}] {mark}"


def create_task(title: str, start: str, end: str, priority: str) -> Task:
    """Build a new, not yet completed task from the four user-supplied fields."""
    return Task(title=title, start=start, end=end, priority=priority)


def validate_time_range(start: str, end: str) -> None:
    """
    Strict-mode check: both values must be zero-padded 24-hour "HH:mm"
    and start must come strictly before end.
    """
    for label, value in (("start", start), ("end", end)):
        if not TIME_RE.match(value or ""):
            raise InvalidTimeError(f"Invalid {label} time {value!r}: expected HH:mm (00:00-23:59).")
    if start >= end:
        raise InvalidTimeError(f"Start time {start} must be before end time {end}.")
