"""Extract the first HTML table into the structural table model."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Tag

from tabsmith.core.diagnostics import DiagnosticEmitter, record_event
from tabsmith.core.exceptions import EmptyTableError, NoTableFoundError
from tabsmith.core.models import Cell, Row, Table

from ._helpers import is_descendant, owning_table, span_attribute


logger = logging.getLogger(__name__)

DEFAULT_PARSER = "lxml"
FALLBACK_PARSER = "html.parser"
CELL_TAGS = ["td", "th"]


def load_soup(
    html: str,
    parser: str = DEFAULT_PARSER,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> BeautifulSoup:
    """Parse HTML, falling back to the built-in parser when a backend is missing.

    ``html.parser`` does not close omitted ``</td>`` or ``</tr>`` tags, so
    it is only used when the requested backend is unavailable.
    """
    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound:
        if parser == FALLBACK_PARSER:
            raise
        logger.debug("parser %s unavailable, falling back to %s", parser, FALLBACK_PARSER)
        record_event(emitter, "parser_fallback", {"preferred": parser, "fallback": FALLBACK_PARSER})
        return BeautifulSoup(html, FALLBACK_PARSER)


def _read_cell(element: Tag) -> Cell:
    return Cell(
        text=element.get_text().strip(),
        rowspan_attr=span_attribute(element, "rowspan"),
        colspan_attr=span_attribute(element, "colspan"),
    )


def _table_rows(table: Tag) -> list[Tag]:
    # Rows of nested tables belong to those tables, not to this one.
    return [row for row in table.find_all("tr") if owning_table(row) is table]


def read_table(element: Tag) -> Table:
    """Build a :class:`Table` from a ``<table>`` element."""
    rows = [
        Row(cells=[_read_cell(cell) for cell in row.find_all(CELL_TAGS, recursive=False)])
        for row in _table_rows(element)
    ]
    if not rows:
        raise EmptyTableError()
    return Table(rows=rows)


def parse_table(
    html: str,
    *,
    parser: str = DEFAULT_PARSER,
    emitter: DiagnosticEmitter | None = None,
) -> Table:
    """Parse the first ``<table>`` of an HTML document.

    Any further tables are ignored. Raises :class:`NoTableFoundError` when the
    document contains no table and :class:`EmptyTableError` when the first
    table has no rows.
    """
    soup = load_soup(html, parser, emitter=emitter)
    tables = soup.find_all("table")
    if not tables:
        raise NoTableFoundError()

    first = tables[0]
    ignored = [table for table in tables[1:] if not is_descendant(table, first)]
    if ignored:
        logger.debug("ignoring %d table(s) after the first one", len(ignored))
        record_event(emitter, "extra_tables_ignored", {"count": len(ignored)})

    return read_table(first)


__all__ = ["DEFAULT_PARSER", "FALLBACK_PARSER", "load_soup", "parse_table", "read_table"]
