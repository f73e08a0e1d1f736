# src/astro_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the single EventBus and IntervalStore for this run,
- subscribes the console notifier,
- wires everything into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..core.state import AppState
from ..schedule.event_bus import EventBus, make_console_notifier
from ..schedule.interval_store import IntervalStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    write: Callable[[str], None] = print,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    bus = EventBus()
    bus.subscribe(make_console_notifier(write, prefix=settings.notify_prefix))

    store = IntervalStore(
        bus,
        strict_times=settings.strict_times,
        check_edit_conflicts=settings.check_edit_conflicts,
    )
    return AppState(settings=settings, bus=bus, store=store)
