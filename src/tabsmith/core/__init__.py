"""Core data model, configuration, and error types."""

from __future__ import annotations

from .config import ConfigError, ConverterConfig, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    ClipboardDecodeError,
    ClipboardError,
    ClipboardUnavailableError,
    EmptyTableError,
    InvalidSpanError,
    NoTableFoundError,
    TableConversionError,
    UnsupportedPlatformError,
)
from .models import Cell, Row, Table


__all__ = [
    "Cell",
    "ClipboardDecodeError",
    "ClipboardError",
    "ClipboardUnavailableError",
    "ConfigError",
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
    "UnsupportedPlatformError",
    "load_config",
]
