# src/kiko/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core import persona
from ..core.ports import split_close_signal
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> You: "


def _print_reply(app_name: str, text: str) -> None:
    print(f"<<< {app_name}: {text}\n", flush=True)


def run_console_loop(state: AppState) -> None:
    """Read one command per line until 'bye', EOF or Ctrl+C."""
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Kiko"))
    logger.info("Console connector started (tasks=%d).", state.tasks.count())
    _print_reply(app_name, persona.GREETING)

    while True:
        try:
            user_input = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        text, close = split_close_signal(reply)
        _print_reply(app_name, text)
        if close:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
