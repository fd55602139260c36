"""Structural model of a parsed HTML table."""

from __future__ import annotations

from dataclasses import dataclass, field
import re


_LEADING_INTEGER = re.compile(r"[+-]?\d+")


def parse_span(value: str | None) -> int:
    """Return the span encoded by an attribute value.

    Leading digits are honoured the way browsers read ``colspan="2px"``; any
    value that does not yield a positive integer falls back to ``1``.
    """
    if value is None:
        return 1
    match = _LEADING_INTEGER.match(value.strip())
    if match is None:
        return 1
    span = int(match.group(0))
    return span if span > 0 else 1


@dataclass(slots=True)
class Cell:
    """A single ``<td>`` or ``<th>`` element."""

    text: str = ""
    rowspan_attr: str | None = None
    colspan_attr: str | None = None

    @property
    def row_span(self) -> int:
        return parse_span(self.rowspan_attr)

    @property
    def col_span(self) -> int:
        return parse_span(self.colspan_attr)

    @property
    def has_span(self) -> bool:
        """Whether the source declared a ``rowspan`` or ``colspan`` attribute."""
        return self.rowspan_attr is not None or self.colspan_attr is not None


@dataclass(slots=True)
class Row:
    """A ``<tr>`` element and its cells in left-to-right order."""

    cells: list[Cell] = field(default_factory=list)

    @property
    def span_width(self) -> int:
        """Number of grid columns covered by the cells of this row."""
        return sum(cell.col_span for cell in self.cells)


@dataclass(slots=True)
class Table:
    """The first ``<table>`` of an HTML document."""

    rows: list[Row] = field(default_factory=list)

    @property
    def columns(self) -> int:
        """Column count declared by the first row.

        Later rows are not consulted, even when their spans add up to a
        different width.
        """
        if not self.rows:
            return 0
        return self.rows[0].span_width

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows


__all__ = ["Cell", "Row", "Table", "parse_span"]
