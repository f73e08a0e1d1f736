# src/astro_schedule/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..schedule.task_models import ScheduleError

logger = logging.getLogger(__name__)

BANNER = "=== Astronaut Daily Schedule Organizer ==="
EXIT_COMMANDS = ("exit", "quit")


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    commands: CommandRegistry = command_registry,
) -> None:
    """
    Read commands line by line until exit, EOF or Ctrl+C.

    Notifications reach the user through whatever subscribers the bus has;
    this loop only prints command replies (not-found, listings, errors).
    """
    logger.info("Console connector started.")
    write(BANNER)
    menu = "Commands: " + ", ".join([*commands.names(), "exit"])

    while True:
        write("")
        write(menu)
        try:
            line = read("Enter: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if line.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = commands.handle(state, line, read)
        except EOFError:
            logger.info("Console EOF received mid-command, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt mid-command, exiting.")
            write("")
            break
        except ScheduleError as e:
            logger.info("Command rejected: %s", e)
            reply = str(e)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
