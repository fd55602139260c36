"""Platform clipboard sources returning the HTML flavour of the clipboard."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import subprocess
import sys
import textwrap
from typing import ClassVar, Protocol, runtime_checkable

from tabsmith.core.diagnostics import DiagnosticEmitter, record_event
from tabsmith.core.exceptions import ClipboardUnavailableError, UnsupportedPlatformError

from .decoding import decode_hex_payload, decode_text, strip_cf_html_header


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@runtime_checkable
class ClipboardSource(Protocol):
    """Capability returning the HTML currently held by the clipboard."""

    def retrieve(self) -> str: ...


class CommandClipboardSource:
    """Read the clipboard by running an external command."""

    name: ClassVar[str] = "command"

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.timeout = timeout
        self.emitter = emitter

    def command(self) -> Sequence[str]:
        raise NotImplementedError

    def decode(self, raw: bytes) -> str:
        return decode_text(raw, source=self.name)

    def _run(self) -> bytes:
        command = list(self.command())
        logger.debug("reading clipboard with %s", command[0])
        try:
            result = subprocess.run(
                command,
                check=False,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise ClipboardUnavailableError(
                f"Clipboard command '{command[0]}' could not be located."
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardUnavailableError(
                f"Clipboard command '{command[0]}' timed out after {self.timeout:g}s."
            ) from exc
        except OSError as exc:
            raise ClipboardUnavailableError(f"Failed to invoke '{command[0]}': {exc}") from exc

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or b"").decode("utf-8", errors="replace")
            message = f"Clipboard command '{command[0]}' failed with exit code {result.returncode}"
            if detail.strip():
                message = f"{message}: {detail.strip()}"
            raise ClipboardUnavailableError(message)
        return result.stdout or b""

    def retrieve(self) -> str:
        """Return the clipboard HTML, raising when none is available."""
        html = self.decode(self._run())
        if not html.strip():
            raise ClipboardUnavailableError("The clipboard does not contain HTML content.")
        record_event(self.emitter, "clipboard_fetch", {"source": self.name, "size": len(html)})
        return html


class MacClipboardSource(CommandClipboardSource):
    """macOS clipboard through AppleScript, which yields a hex-encoded record."""

    name = "osascript"

    def command(self) -> Sequence[str]:
        return ["osascript", "-e", "the clipboard as «class HTML»"]

    def decode(self, raw: bytes) -> str:
        return decode_hex_payload(super().decode(raw))


class WindowsClipboardSource(CommandClipboardSource):
    """Windows clipboard through PowerShell and ``System.Windows.Forms``."""

    name = "powershell"

    SCRIPT: ClassVar[str] = textwrap.dedent(
        """
        [Console]::OutputEncoding = [System.Text.Encoding]::UTF8
        Add-Type -AssemblyName System.Windows.Forms
        if ([Windows.Forms.Clipboard]::ContainsData([Windows.Forms.DataFormats]::Html)) {
            [Windows.Forms.Clipboard]::GetData([Windows.Forms.DataFormats]::Html)
        }
        """
    ).strip()

    def command(self) -> Sequence[str]:
        return ["powershell", "-NoProfile", "-STA", "-command", self.SCRIPT]

    def decode(self, raw: bytes) -> str:
        return strip_cf_html_header(super().decode(raw))


class LinuxClipboardSource(CommandClipboardSource):
    """X11 clipboard through ``xclip``."""

    name = "xclip"

    def command(self) -> Sequence[str]:
        return ["xclip", "-selection", "clipboard", "-t", "text/html", "-o"]


PLATFORM_SOURCES: dict[str, type[CommandClipboardSource]] = {
    "darwin": MacClipboardSource,
    "win32": WindowsClipboardSource,
    "linux": LinuxClipboardSource,
}


def select_clipboard_source(
    platform: str | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    emitter: DiagnosticEmitter | None = None,
) -> CommandClipboardSource:
    """Return the clipboard source matching the host platform."""
    current = platform if platform is not None else sys.platform
    source_cls = PLATFORM_SOURCES.get(current)
    if source_cls is None:
        raise UnsupportedPlatformError(current)
    return source_cls(timeout=timeout, emitter=emitter)


def get_clipboard_html(
    platform: str | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Read the HTML flavour of the clipboard on the current platform."""
    return select_clipboard_source(platform, timeout=timeout, emitter=emitter).retrieve()


__all__ = [
    "DEFAULT_TIMEOUT",
    "PLATFORM_SOURCES",
    "ClipboardSource",
    "CommandClipboardSource",
    "LinuxClipboardSource",
    "MacClipboardSource",
    "WindowsClipboardSource",
    "get_clipboard_html",
    "select_clipboard_source",
]
