"""Clipboard adapters supplying HTML to the converter."""

from __future__ import annotations

from .decoding import decode_hex_payload, strip_cf_html_header
from .sources import (
    PLATFORM_SOURCES,
    ClipboardSource,
    CommandClipboardSource,
    LinuxClipboardSource,
    MacClipboardSource,
    WindowsClipboardSource,
    get_clipboard_html,
    select_clipboard_source,
)


__all__ = [
    "PLATFORM_SOURCES",
    "ClipboardSource",
    "CommandClipboardSource",
    "LinuxClipboardSource",
    "MacClipboardSource",
    "WindowsClipboardSource",
    "decode_hex_payload",
    "get_clipboard_html",
    "select_clipboard_source",
    "strip_cf_html_header",
]
