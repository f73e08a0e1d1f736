# src/astro_schedule/schedule/event_bus.py

from __future__ import annotations

"""
In-process event bus.

Subscribers are plain callables taking the notification text. Delivery is
synchronous and in registration order; a failing subscriber propagates its
exception to whoever published.
"""

import logging
from collections.abc import Callable

from ..core.ports import Subscriber

logger = logging.getLogger(__name__)

NOTIFY_PREFIX = "[NOTIFY]"


class EventBus:
    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, handler: Subscriber) -> None:
        # No de-duplication: subscribing twice means being called twice.
        self._subscribers.append(handler)
        logger.debug("Subscriber registered total=%d", len(self._subscribers))

    def publish(self, message: str) -> None:
        logger.debug("Publishing to %d subscriber(s): %s", len(self._subscribers), message)
        for handler in list(self._subscribers):
            handler(message)

    def __len__(self) -> int:
        return len(self._subscribers)


def make_console_notifier(
    write: Callable[[str], None] = print,
    *,
    prefix: str = NOTIFY_PREFIX,
) -> Subscriber:
    """Subscriber that writes "<prefix> <message>" through `write`."""

    def _notify(message: str) -> None:
        write(f"{prefix} {message}")

    return _notify
