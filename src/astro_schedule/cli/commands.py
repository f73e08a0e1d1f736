# src/astro_schedule/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..schedule.task_models import create_task

Prompt = Callable[[str], str]
CommandHandler = Callable[[AppState, Prompt], str | None]

INVALID_COMMAND = "Invalid command."
NOT_FOUND = "Task not found."
NO_TASKS = "No tasks."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Line-command registry used by the console connector.

    A handler receives the state and a prompt function it uses to read
    further fields, one per line. It returns text to print, or None when
    the outcome was already reported through the event bus.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, state: AppState, line: str, prompt: Prompt) -> str | None:
        name = line.strip().lower()
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command: %r", line)
            return INVALID_COMMAND
        return handler(state, prompt)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, prompt: Prompt) -> str | None:
    title = prompt("Title: ")
    start = prompt("Start (HH:mm): ")
    end = prompt("End (HH:mm): ")
    priority = prompt("Priority: ")
    state.store.add(create_task(title, start, end, priority))
    return None


def cmd_remove(state: AppState, prompt: Prompt) -> str | None:
    if not state.store.remove(prompt("Title: ")):
        return NOT_FOUND
    return None


def cmd_edit(state: AppState, prompt: Prompt) -> str | None:
    old_title = prompt("Old title: ")
    new_title = prompt("New title: ")
    start = prompt("Start: ")
    end = prompt("End: ")
    priority = prompt("Priority: ")
    if not state.store.edit(old_title, new_title, start, end, priority):
        return NOT_FOUND
    return None


def cmd_complete(state: AppState, prompt: Prompt) -> str | None:
    if not state.store.complete(prompt("Title: ")):
        return NOT_FOUND
    return None


def cmd_view(state: AppState, prompt: Prompt) -> str | None:
    tasks = state.store.list_sorted()
    if not tasks:
        return NO_TASKS
    return "\n".join(str(t) for t in tasks)


def cmd_help(state: AppState, prompt: Prompt) -> str | None:
    return registry.build_help()


registry.register("add", cmd_add, help_text="Schedule a task (title, start, end, priority).")
registry.register("remove", cmd_remove, help_text="Remove a task by title.")
registry.register("edit", cmd_edit, help_text="Replace a task's title, times and priority.")
registry.register("complete", cmd_complete, help_text="Mark a task as completed.")
registry.register("view", cmd_view, help_text="List tasks ordered by start time.")
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["?"])
