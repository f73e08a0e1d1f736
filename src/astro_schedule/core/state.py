# src/astro_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import EventPublisher, ScheduleRepo


@dataclass
class AppState:
    """
    Process-wide application state.

    Exactly one store and one bus live here for the whole run; everything
    that needs them receives this object instead of reaching for globals.
    """

    # Settings object (config.Settings or a test stand-in).
    settings: Any

    bus: EventPublisher
    store: ScheduleRepo
