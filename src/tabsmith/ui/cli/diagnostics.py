"""Print conversion events on stderr when the command runs verbosely."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tabsmith.core.diagnostics import format_event_message

from .state import CLIState, get_cli_state, render_message


class CliEmitter:
    """Event sink for the ``tabsmith`` command; silent below ``-v``."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]
