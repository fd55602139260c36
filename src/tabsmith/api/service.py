"""Conversion orchestration for embedding and CLI integrations."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from tabsmith.adapters.clipboard import ClipboardSource, select_clipboard_source
from tabsmith.adapters.html import parse_table
from tabsmith.adapters.typst import TypstFormatter
from tabsmith.core.config import ConverterConfig
from tabsmith.core.diagnostics import DiagnosticEmitter, ensure_emitter, record_event
from tabsmith.core.models import Table


logger = logging.getLogger(__name__)

__all__ = [
    "ConversionResult",
    "ConversionService",
    "convert_clipboard",
    "convert_html",
]


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Markup produced for a table together with the parsed model."""

    markup: str
    table: Table

    @property
    def columns(self) -> int:
        return self.table.columns

    @property
    def rows(self) -> int:
        return self.table.row_count

    def __str__(self) -> str:
        return self.markup


class ConversionService:
    """Parse HTML tables and serialise them as Typst markup."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
        clipboard: ClipboardSource | None = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.emitter = ensure_emitter(emitter)
        self._clipboard = clipboard
        self.formatter = TypstFormatter(
            indent=self.config.indent,
            span_policy=self.config.span_policy,
        )

    @property
    def clipboard(self) -> ClipboardSource:
        """Clipboard source, selected for the host platform on first use."""
        if self._clipboard is None:
            self._clipboard = select_clipboard_source(
                timeout=self.config.clipboard_timeout,
                emitter=self.emitter,
            )
        return self._clipboard

    def convert(self, html: str) -> ConversionResult:
        """Convert the first table of ``html``."""
        table = parse_table(html, parser=self.config.parser, emitter=self.emitter)
        markup = self.formatter.table(table)
        logger.debug("converted table: %d rows, %d columns", table.row_count, table.columns)
        record_event(
            self.emitter,
            "table_converted",
            {"rows": table.row_count, "columns": table.columns},
        )
        return ConversionResult(markup=markup, table=table)

    def convert_clipboard(self) -> ConversionResult:
        """Read HTML from the clipboard and convert its first table."""
        return self.convert(self.clipboard.retrieve())


def convert_html(
    html: str,
    config: ConverterConfig | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Return the Typst markup for the first table of ``html``."""
    return ConversionService(config, emitter=emitter).convert(html).markup


def convert_clipboard(
    config: ConverterConfig | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
    source: ClipboardSource | None = None,
) -> str:
    """Return the Typst markup for the first table held by the clipboard."""
    service = ConversionService(config, emitter=emitter, clipboard=source)
    return service.convert_clipboard().markup
