from __future__ import annotations

from collections.abc import Mapping
import subprocess
from typing import Any

import pytest

from tabsmith.adapters.clipboard import (
    LinuxClipboardSource,
    MacClipboardSource,
    WindowsClipboardSource,
    decode_hex_payload,
    get_clipboard_html,
    select_clipboard_source,
    strip_cf_html_header,
)
from tabsmith.adapters.clipboard import sources as sources_mod
from tabsmith.core.exceptions import (
    ClipboardDecodeError,
    ClipboardUnavailableError,
    UnsupportedPlatformError,
)


class _StubResult:
    def __init__(self, returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class RecordingEmitter:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def _cf_html(fragment: str) -> str:
    template = "Version:0.9\r\nStartHTML:{:010d}\r\nEndHTML:{:010d}\r\n"
    start = len(template.format(0, 0).encode("utf-8"))
    end = start + len(fragment.encode("utf-8"))
    return template.format(start, end) + fragment


def _stub_run(monkeypatch: pytest.MonkeyPatch, result: _StubResult) -> dict[str, Any]:
    recorded: dict[str, Any] = {}

    def fake_run(cmd: list[str], **kwargs: Any) -> _StubResult:
        recorded["command"] = cmd
        recorded["kwargs"] = kwargs
        return result

    monkeypatch.setattr(sources_mod.subprocess, "run", fake_run)
    return recorded


@pytest.mark.parametrize(
    "payload",
    [
        "«data HTML3C623E68693C2F623E»",
        "«data HTML3C623E68693C2F623E»\n",
        "<<data HTML3C623E68693C2F623E>>",
        "<< data html3c623e68693c2f623e >>",
    ],
)
def test_decode_hex_payload(payload: str) -> None:
    assert decode_hex_payload(payload) == "<b>hi</b>"


def test_decode_hex_payload_handles_multibyte_text() -> None:
    encoded = "café".encode().hex().upper()

    assert decode_hex_payload(f"«data HTML{encoded}»") == "café"


@pytest.mark.parametrize(
    "payload",
    [
        "«data HTML3C6»",
        "«data HTMLZZZZ»",
        "«data HTMLFF»",
    ],
)
def test_decode_hex_payload_rejects_malformed_data(payload: str) -> None:
    with pytest.raises(ClipboardDecodeError):
        decode_hex_payload(payload)


def test_strip_cf_html_header_uses_start_offset() -> None:
    fragment = "<html><body><table><tr><td>Zürich</td></tr></table></body></html>"

    assert strip_cf_html_header(_cf_html(fragment)) == fragment


def test_strip_cf_html_header_falls_back_to_first_tag() -> None:
    payload = "Version:0.9\r\nStartHTML:0000099999\r\n<table><tr><td>A</td></tr></table>"

    assert strip_cf_html_header(payload) == "<table><tr><td>A</td></tr></table>"


def test_strip_cf_html_header_leaves_plain_html_alone() -> None:
    html = "<table><tr><td>A</td></tr></table>"

    assert strip_cf_html_header(html) == html


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("darwin", MacClipboardSource),
        ("win32", WindowsClipboardSource),
        ("linux", LinuxClipboardSource),
    ],
)
def test_select_clipboard_source(platform: str, expected: type) -> None:
    source = select_clipboard_source(platform, timeout=3)

    assert type(source) is expected
    assert source.timeout == 3


def test_select_clipboard_source_rejects_unknown_platform() -> None:
    with pytest.raises(UnsupportedPlatformError) as excinfo:
        select_clipboard_source("sunos5")

    assert excinfo.value.platform == "sunos5"
    assert "Unsupported platform: sunos5" in str(excinfo.value)


def test_linux_source_runs_xclip(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded = _stub_run(monkeypatch, _StubResult(stdout=b"<table><tr><td>A</td></tr></table>"))
    emitter = RecordingEmitter()

    html = LinuxClipboardSource(timeout=5, emitter=emitter).retrieve()

    assert html == "<table><tr><td>A</td></tr></table>"
    assert recorded["command"] == ["xclip", "-selection", "clipboard", "-t", "text/html", "-o"]
    assert recorded["kwargs"]["timeout"] == 5
    assert recorded["kwargs"]["capture_output"] is True
    assert emitter.events == [("clipboard_fetch", {"source": "xclip", "size": len(html)})]


def test_mac_source_decodes_applescript_record(monkeypatch: pytest.MonkeyPatch) -> None:
    payload = "«data HTML" + "<table></table>".encode().hex().upper() + "»\n"
    recorded = _stub_run(monkeypatch, _StubResult(stdout=payload.encode("utf-8")))

    assert MacClipboardSource().retrieve() == "<table></table>"
    assert recorded["command"][0] == "osascript"


def test_windows_source_strips_cf_html_header(monkeypatch: pytest.MonkeyPatch) -> None:
    fragment = "<html><body><table><tr><td>A</td></tr></table></body></html>"
    recorded = _stub_run(monkeypatch, _StubResult(stdout=_cf_html(fragment).encode("utf-8")))

    assert WindowsClipboardSource().retrieve() == fragment
    assert recorded["command"][0] == "powershell"
    assert "DataFormats]::Html" in recorded["command"][-1]


def test_missing_command_reports_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs: Any) -> _StubResult:
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(sources_mod.subprocess, "run", fake_run)

    with pytest.raises(ClipboardUnavailableError, match="xclip"):
        LinuxClipboardSource().retrieve()


def test_timeout_reports_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs: Any) -> _StubResult:
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr(sources_mod.subprocess, "run", fake_run)

    with pytest.raises(ClipboardUnavailableError, match="timed out"):
        LinuxClipboardSource(timeout=1).retrieve()


def test_failed_command_includes_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_run(
        monkeypatch,
        _StubResult(returncode=1, stderr=b"Error: target text/html not available\n"),
    )

    with pytest.raises(ClipboardUnavailableError) as excinfo:
        LinuxClipboardSource().retrieve()

    assert "exit code 1" in str(excinfo.value)
    assert "target text/html not available" in str(excinfo.value)


def test_empty_clipboard_reports_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_run(monkeypatch, _StubResult(stdout=b"\r\n"))

    with pytest.raises(ClipboardUnavailableError, match="does not contain HTML"):
        WindowsClipboardSource().retrieve()


def test_undecodable_output_reports_decode_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_run(monkeypatch, _StubResult(stdout=b"\xff\xfe<table>"))

    with pytest.raises(ClipboardDecodeError):
        LinuxClipboardSource().retrieve()


def test_get_clipboard_html_dispatches_on_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded = _stub_run(monkeypatch, _StubResult(stdout=b"<table></table>"))

    assert get_clipboard_html("linux") == "<table></table>"
    assert recorded["command"][0] == "xclip"
