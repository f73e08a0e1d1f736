# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from astro_schedule.cli.bootstrap import create_initial_state
from astro_schedule.core.state import AppState
from astro_schedule.schedule.event_bus import EventBus
from astro_schedule.schedule.interval_store import IntervalStore

from .fakes import OutputCapture, RecordingSubscriber


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="astro-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_to_file=False,
        strict_times=False,
        check_edit_conflicts=False,
        notify_prefix="[NOTIFY]",
    )


@pytest.fixture()
def events() -> RecordingSubscriber:
    return RecordingSubscriber()


@pytest.fixture()
def bus(events: RecordingSubscriber) -> EventBus:
    b = EventBus()
    b.subscribe(events)
    return b


@pytest.fixture()
def store(bus: EventBus) -> IntervalStore:
    return IntervalStore(bus)


@pytest.fixture()
def output() -> OutputCapture:
    return OutputCapture()


@pytest.fixture()
def state(settings: SimpleNamespace, output: OutputCapture) -> AppState:
    """AppState wired by the real composition root, printing into `output`."""
    return create_initial_state(settings=settings, write=output)
