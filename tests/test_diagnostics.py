from __future__ import annotations

import logging

import pytest

from tabsmith.core.diagnostics import LoggingEmitter, NullEmitter, format_event_message
from tabsmith.core.exceptions import ClipboardUnavailableError, NoTableFoundError
from tabsmith.ui.cli.diagnostics import CliEmitter
from tabsmith.ui.cli.state import CLIState, emit_error, get_cli_state, set_cli_state


def _raise_nested_clipboard_error() -> None:
    try:
        raise FileNotFoundError("xclip")
    except FileNotFoundError as exc:
        raise ClipboardUnavailableError("Clipboard command 'xclip' could not be located.") from exc


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        NullEmitter().event("ignored", {"value": 1})
    assert not caplog.records


def test_logging_emitter_formats_known_events(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.event("parser_fallback", {"preferred": "lxml", "fallback": "html.parser"})
        emitter.event("custom", {"flag": True})

    messages = [record.getMessage() for record in caplog.records]
    assert "HTML parser 'lxml' is not installed, using 'html.parser'" in messages
    assert "diagnostic event custom: {'flag': True}" in messages


@pytest.mark.parametrize(
    ("name", "payload", "expected"),
    [
        ("extra_tables_ignored", {"count": 1}, "Ignoring 1 additional table after the first one"),
        ("extra_tables_ignored", {"count": 2}, "Ignoring 2 additional tables after the first one"),
        ("clipboard_fetch", {"source": "xclip", "size": 42}, "Read HTML from clipboard via xclip (42 characters)"),
        ("table_converted", {"rows": 2, "columns": 3}, "Converted table with 2 row(s) and 3 column(s)"),
        ("unknown", {}, None),
    ],
)
def test_format_event_message(name: str, payload: dict, expected: str | None) -> None:
    assert format_event_message(name, payload) == expected


def test_cli_emitter_prints_events_when_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    emitter = CliEmitter(CLIState(verbosity=1))

    emitter.event("table_converted", {"rows": 1, "columns": 1})
    emitter.event("custom", {"flag": True})

    captured = capsys.readouterr()
    assert captured.err.strip() == "Converted table with 1 row(s) and 1 column(s)"
    assert captured.out == ""


def test_cli_emitter_is_quiet_without_verbosity(capsys: pytest.CaptureFixture[str]) -> None:
    emitter = CliEmitter(CLIState(verbosity=0))

    emitter.event("table_converted", {"rows": 1, "columns": 1})

    assert capsys.readouterr().err == ""


def test_set_cli_state_starts_fresh() -> None:
    first = set_cli_state(verbosity=2, debug=True)
    second = set_cli_state()

    assert second is not first
    assert get_cli_state() is second
    assert (second.verbosity, second.show_tracebacks) == (0, False)


def test_error_rendering_includes_cause_chain(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=2, debug=False)
    with pytest.raises(ClipboardUnavailableError) as excinfo:
        _raise_nested_clipboard_error()

    emit_error(str(excinfo.value), exception=excinfo.value)

    err = capsys.readouterr().err
    assert "error: Clipboard command 'xclip' could not be located." in err
    assert "type: ClipboardUnavailableError" in err
    assert "caused by:" in err
    assert "FileNotFoundError: xclip" in err


def test_error_rendering_is_terse_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state()

    emit_error("No table found in HTML content", exception=NoTableFoundError())

    assert capsys.readouterr().err.strip() == "error: No table found in HTML content"


def test_no_table_error_has_stable_message() -> None:
    assert str(NoTableFoundError()) == "No table found in HTML content"
