"""Decoders for platform-specific clipboard HTML payloads."""

from __future__ import annotations

import binascii
import re

from tabsmith.core.exceptions import ClipboardDecodeError


_APPLESCRIPT_PREFIX = re.compile(r"^(?:«|<<)\s*data HTML", re.IGNORECASE)
_APPLESCRIPT_SUFFIX = re.compile(r"(?:»|>>)$")
_CF_HTML_START = re.compile(r"^StartHTML:\s*(-?\d+)", re.MULTILINE)


def decode_hex_payload(payload: str) -> str:
    """Decode an AppleScript ``«data HTML…»`` record into UTF-8 text."""
    cleaned = payload.strip()
    cleaned = _APPLESCRIPT_PREFIX.sub("", cleaned)
    cleaned = _APPLESCRIPT_SUFFIX.sub("", cleaned).strip()
    if len(cleaned) % 2:
        raise ClipboardDecodeError(
            f"Failed to decode clipboard content: odd-length hex payload ({len(cleaned)} digits)"
        )
    try:
        raw = binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise ClipboardDecodeError(f"Failed to decode clipboard content: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ClipboardDecodeError(f"Failed to decode clipboard content: {exc}") from exc


def strip_cf_html_header(payload: str) -> str:
    """Drop the ``Version:``/``StartHTML:`` preamble of a Windows CF_HTML payload.

    Offsets in the header count UTF-8 bytes. When the declared offset does not
    land on markup the payload is cut at the first ``<`` instead.
    """
    if not payload.startswith("Version:"):
        return payload

    match = _CF_HTML_START.search(payload)
    if match is not None:
        offset = int(match.group(1))
        encoded = payload.encode("utf-8")
        if 0 <= offset < len(encoded):
            candidate = encoded[offset:].decode("utf-8", errors="replace")
            if candidate.lstrip().startswith("<"):
                return candidate

    start = payload.find("<")
    return payload[start:] if start >= 0 else ""


def decode_text(raw: bytes, *, source: str) -> str:
    """Decode raw command output as UTF-8, tolerating a byte-order mark."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ClipboardDecodeError(
            f"Failed to decode clipboard content from {source}: {exc}"
        ) from exc


__all__ = ["decode_hex_payload", "decode_text", "strip_cf_html_header"]
