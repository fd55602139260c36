"""Render the structural table model as Typst ``#table`` markup."""

from __future__ import annotations

from pathlib import Path
import re

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from tabsmith.core.config import SpanPolicy
from tabsmith.core.exceptions import InvalidSpanError
from tabsmith.core.models import Cell, Row, Table


TEMPLATE_DIR = Path(__file__).resolve().parent / "partials"

_POSITIVE_INTEGER = re.compile(r"\+?0*[1-9]\d*")


class TypstFormatter:
    """Serialise tables into Typst markup.

    Every cell entry is followed by ``", "``, including the last one of a row,
    and the output ends with the closing parenthesis of the table call.
    """

    def __init__(
        self,
        *,
        indent: str = "  ",
        span_policy: SpanPolicy = "literal",
        template_dir: Path = TEMPLATE_DIR,
    ) -> None:
        self.indent = indent
        self.span_policy = span_policy
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self._table_template: Template | None = None

    @property
    def table_template(self) -> Template:
        if self._table_template is None:
            self._table_template = self.env.get_template("table.typ")
        return self._table_template

    def span_value(self, attribute: str, value: str) -> str:
        """Return the span literal written after ``rowspan:`` or ``colspan:``."""
        if self.span_policy == "literal":
            return value
        number = value.strip()
        if _POSITIVE_INTEGER.fullmatch(number) is None:
            raise InvalidSpanError(attribute, value)
        return str(int(number))

    def cell(self, cell: Cell) -> str:
        """Render a single cell entry without its trailing separator."""
        content = f"[{cell.text}]"
        if not cell.has_span:
            return content

        arguments = ""
        if cell.rowspan_attr is not None:
            arguments += f"rowspan: {self.span_value('rowspan', cell.rowspan_attr)}, "
        if cell.colspan_attr is not None:
            arguments += f"colspan: {self.span_value('colspan', cell.colspan_attr)}, "
        return f"table.cell({arguments}){content}"

    def row(self, row: Row) -> list[str]:
        return [self.cell(cell) for cell in row.cells]

    def table(self, table: Table) -> str:
        """Render a complete ``#table(...)`` call."""
        return self.table_template.render(
            columns=table.columns,
            rows=[self.row(row) for row in table.rows],
            indent=self.indent,
        )


__all__ = ["TEMPLATE_DIR", "TypstFormatter"]
