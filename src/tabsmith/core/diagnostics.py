"""Diagnostic abstractions shared across the conversion pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receiver for the structured events raised while converting a table."""

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every event."""

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards events to the standard logging module."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def ensure_emitter(emitter: DiagnosticEmitter | None) -> DiagnosticEmitter:
    """Return a usable emitter, defaulting to the null implementation."""
    return emitter if emitter is not None else NullEmitter()


def record_event(
    emitter: DiagnosticEmitter | None,
    event: str,
    payload: Mapping[str, Any],
) -> None:
    """Forward a structured diagnostic event."""
    ensure_emitter(emitter).event(event, payload)


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "parser_fallback":
        preferred = data.get("preferred") or "<unknown>"
        fallback = data.get("fallback") or "html.parser"
        return f"HTML parser '{preferred}' is not installed, using '{fallback}'"

    if name == "extra_tables_ignored":
        count = int(data.get("count") or 0)
        noun = "table" if count == 1 else "tables"
        return f"Ignoring {count} additional {noun} after the first one"

    if name == "clipboard_fetch":
        source = data.get("source") or "<unknown>"
        size = data.get("size")
        suffix = f" ({size} characters)" if size is not None else ""
        return f"Read HTML from clipboard via {source}{suffix}"

    if name == "table_converted":
        rows = data.get("rows", 0)
        columns = data.get("columns", 0)
        return f"Converted table with {rows} row(s) and {columns} column(s)"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "ensure_emitter",
    "format_event_message",
    "record_event",
]
