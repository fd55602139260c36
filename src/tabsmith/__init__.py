"""Convert HTML tables, typically copied to the clipboard, into Typst markup."""

from __future__ import annotations

from tabsmith.adapters.clipboard import ClipboardSource, get_clipboard_html, select_clipboard_source
from tabsmith.adapters.html import parse_table
from tabsmith.adapters.typst import TypstFormatter
from tabsmith.api import ConversionResult, ConversionService, convert_clipboard, convert_html
from tabsmith.core.config import ConfigError, ConverterConfig, load_config
from tabsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from tabsmith.core.exceptions import (
    ClipboardDecodeError,
    ClipboardError,
    ClipboardUnavailableError,
    EmptyTableError,
    InvalidSpanError,
    NoTableFoundError,
    TableConversionError,
    UnsupportedPlatformError,
)
from tabsmith.core.models import Cell, Row, Table
from tabsmith.version import get_version


__version__ = get_version()

__all__ = [
    "Cell",
    "ClipboardDecodeError",
    "ClipboardError",
    "ClipboardSource",
    "ClipboardUnavailableError",
    "ConfigError",
    "ConversionResult",
    "ConversionService",
    "ConverterConfig",
    "DiagnosticEmitter",
    "EmptyTableError",
    "InvalidSpanError",
    "LoggingEmitter",
    "NoTableFoundError",
    "NullEmitter",
    "Row",
    "Table",
    "TableConversionError",
    "TypstFormatter",
    "UnsupportedPlatformError",
    "__version__",
    "convert_clipboard",
    "convert_html",
    "get_clipboard_html",
    "get_version",
    "load_config",
    "parse_table",
    "select_clipboard_source",
]
