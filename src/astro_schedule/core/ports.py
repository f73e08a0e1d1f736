# src/astro_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front end.

The console and command handlers depend on these Protocols instead of the
concrete store, which keeps tests free to pass in-memory doubles.
"""

from typing import Any, Callable, Iterator, Protocol

Subscriber = Callable[[str], None]
# Receives one notification line, e.g. "Task added: EVA prep".


class ScheduleRepo(Protocol):
    def add(self, task: Any) -> None: ...
    def remove(self, title: str) -> bool: ...
    def edit(
            self,
            old_title: str,
            new_title: str,
            start: str,
            end: str,
            priority: str,
    ) -> bool: ...
    def complete(self, title: str) -> bool: ...
    def list_sorted(self) -> tuple[Any, ...]: ...
    def find(self, title: str) -> Any | None: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Any]: ...


class EventPublisher(Protocol):
    def subscribe(self, handler: Subscriber) -> None: ...
    def publish(self, message: str) -> None: ...
