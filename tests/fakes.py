# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingSubscriber:
    """
    Subscriber double that records every notification it receives.

    `log` may be shared between several subscribers to assert call order.
    """

    name: str = "rec"
    messages: list[str] = field(default_factory=list)
    log: list[tuple[str, str]] | None = None

    def __call__(self, message: str) -> None:
        self.messages.append(message)
        if self.log is not None:
            self.log.append((self.name, message))


class ScriptedInput:
    """
    Stand-in for input(): returns queued lines, then raises EOFError.

    Captures the prompts it was asked with for assertions.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


class OutputCapture:
    """Stand-in for print() collecting written lines."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.extend(str(text).split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
