# src/astro_schedule/schedule/interval_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from .event_bus import EventBus
from .task_models import Task, validate_time_range

logger = logging.getLogger(__name__)


class IntervalStore:
    """
    In-memory task registry.

    Rules:
    - add() rejects a task whose [start, end) overlaps any stored task and
      reports the first overlap found (in current list order) on the bus
    - titles are matched case-insensitively; the first match wins
    - edit() does not re-check overlaps unless check_edit_conflicts is set
    - times are compared as raw strings; strict_times turns on HH:mm validation

    Not-found is reported through the boolean result, never as an event.
    """

    def __init__(
        self,
        bus: EventBus,
        *,
        strict_times: bool = False,
        check_edit_conflicts: bool = False,
    ) -> None:
        self._bus = bus
        self._tasks: list[Task] = []
        self._strict_times = strict_times
        self._check_edit_conflicts = check_edit_conflicts
        logger.info(
            "IntervalStore ready strict_times=%s check_edit_conflicts=%s",
            strict_times,
            check_edit_conflicts,
        )

    # ---- helpers ----

    def find(self, title: str) -> Task | None:
        for task in self._tasks:
            if task.matches(title):
                return task
        return None

    def _first_overlap(self, candidate: Task, *, ignore: Task | None = None) -> Task | None:
        for existing in self._tasks:
            if existing is ignore:
                continue
            if existing.overlaps(candidate):
                return existing
        return None

    def _report_conflict(self, candidate: Task, existing: Task) -> None:
        logger.debug("Conflict title=%s existing=%s", candidate.title, existing.title)
        self._bus.publish(f"Conflict: {candidate.title} overlaps with {existing.title}")

    # ---- public API ----

    def add(self, task: Task) -> None:
        if self._strict_times:
            validate_time_range(task.start, task.end)

        existing = self._first_overlap(task)
        if existing is not None:
            self._report_conflict(task, existing)
            return

        self._tasks.append(task)
        logger.debug("Task added title=%s %s-%s", task.title, task.start, task.end)
        self._bus.publish(f"Task added: {task.title}")

    def remove(self, title: str) -> bool:
        task = self.find(title)
        if task is None:
            logger.debug("remove: not found title=%s", title)
            return False

        self._tasks.remove(task)
        self._bus.publish(f"Task removed: {task.title}")
        return True

    def edit(self, old_title: str, new_title: str, start: str, end: str, priority: str) -> bool:
        """
        Overwrite all fields of the task matching old_title.

        Returns False only when no task matches. With check_edit_conflicts
        an overlapping edit is reported as a Conflict and the task is left
        as it was (the result is still True: the task exists).
        """
        task = self.find(old_title)
        if task is None:
            logger.debug("edit: not found title=%s", old_title)
            return False

        if self._strict_times:
            validate_time_range(start, end)

        if self._check_edit_conflicts:
            proposed = Task(title=new_title, start=start, end=end, priority=priority)
            existing = self._first_overlap(proposed, ignore=task)
            if existing is not None:
                self._report_conflict(proposed, existing)
                return True

        task.update(new_title, start, end, priority)
        self._bus.publish(f"Task updated: {new_title}")
        return True

    def complete(self, title: str) -> bool:
        task = self.find(title)
        if task is None:
            logger.debug("complete: not found title=%s", title)
            return False

        task.mark_complete()
        self._bus.publish(f"Task completed: {task.title}")
        return True

    def list_sorted(self) -> tuple[Task, ...]:
        """
        Return all tasks ordered by start time (stable on ties).

        The backing list is sorted in place, so later conflict scans walk
        tasks chronologically. An empty tuple means there are no tasks.
        """
        self._tasks.sort(key=lambda t: t.start)
        return tuple(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
