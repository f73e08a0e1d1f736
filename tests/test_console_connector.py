# tests/test_console_connector.py

from __future__ import annotations

from astro_schedule.cli.bootstrap import create_initial_state
from astro_schedule.connectors.console_connector import BANNER, run_console_loop

from .fakes import OutputCapture, ScriptedInput


def _run(state, output, lines: list[str]) -> ScriptedInput:
    read = ScriptedInput(lines)
    run_console_loop(state, read=read, write=output)
    return read


def test_scenario_conflict_then_view(state, output) -> None:
    _run(
        state,
        output,
        [
            "add", "A", "09:00", "10:00", "HIGH",
            "ADD", "B", "09:30", "10:30", "LOW",
            "view",
            "exit",
        ],
    )

    assert output.lines[0] == BANNER
    assert "[NOTIFY] Task added: A" in output.lines
    assert "[NOTIFY] Conflict: B overlaps with A" in output.lines
    assert "09:00-10:00 | A [HIGH] " in output.lines
    assert len(state.store) == 1


def test_invalid_command_keeps_loop_running(state, output) -> None:
    read = _run(state, output, ["launch", "view", "exit"])

    assert "Invalid command." in output.lines
    assert "No tasks." in output.lines
    assert read.prompts == ["Enter: ", "Enter: ", "Enter: "]


def test_not_found_is_printed(state, output) -> None:
    _run(state, output, ["remove", "ghost", "complete", "ghost", "exit"])
    assert output.lines.count("Task not found.") == 2


def test_eof_ends_loop_even_mid_command(state, output) -> None:
    read = _run(state, output, ["add", "A"])
    assert read.prompts[-1] == "Start (HH:mm): "
    assert state.store.list_sorted() == ()


def test_menu_lists_commands(state, output) -> None:
    _run(state, output, ["exit"])
    menu = [line for line in output.lines if line.startswith("Commands:")]
    assert menu == ["Commands: add, remove, edit, complete, view, help, exit"]


def test_strict_mode_error_is_reported_and_loop_continues(settings) -> None:
    settings.strict_times = True
    output = OutputCapture()
    state = create_initial_state(settings=settings, write=output)

    _run(state, output, ["add", "A", "9:00", "10:00", "HIGH", "view", "exit"])

    assert any(line.startswith("Invalid start time '9:00'") for line in output.lines)
    assert "No tasks." in output.lines


def test_handler_crash_is_reported(state, output) -> None:
    def boom(message: str) -> None:
        raise RuntimeError("subscriber down")

    state.bus.subscribe(boom)
    _run(state, output, ["add", "A", "09:00", "10:00", "HIGH", "exit"])

    assert "Internal error while handling a command." in output.lines
    # The task was stored before the failing subscriber was reached.
    assert len(state.store) == 1
