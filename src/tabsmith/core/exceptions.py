"""Exception hierarchy for table conversion and clipboard retrieval."""

from __future__ import annotations


class TableConversionError(RuntimeError):
    """Base exception for HTML table conversion failures."""


class NoTableFoundError(TableConversionError):
    """Raised when the HTML input does not contain any ``<table>`` element."""

    def __init__(self, message: str = "No table found in HTML content") -> None:
        super().__init__(message)


class EmptyTableError(TableConversionError):
    """Raised when the selected table does not contain a single row."""

    def __init__(self, message: str = "The table does not contain any rows") -> None:
        super().__init__(message)


class InvalidSpanError(TableConversionError):
    """Raised when a span attribute cannot be expressed as a positive integer."""

    def __init__(self, attribute: str, value: str) -> None:
        self.attribute = attribute
        self.value = value
        super().__init__(f"Invalid {attribute} value '{value}': expected a positive integer")


class ClipboardError(RuntimeError):
    """Base exception for clipboard retrieval failures."""


class UnsupportedPlatformError(ClipboardError):
    """Raised when no clipboard source exists for the host platform."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class ClipboardUnavailableError(ClipboardError):
    """Raised when the clipboard holds no HTML or the retrieval command fails."""


class ClipboardDecodeError(ClipboardError):
    """Raised when a clipboard payload cannot be decoded to text."""


__all__ = [
    "ClipboardDecodeError",
    "ClipboardError",
    "ClipboardUnavailableError",
    "EmptyTableError",
    "InvalidSpanError",
    "NoTableFoundError",
    "TableConversionError",
    "UnsupportedPlatformError",
]
