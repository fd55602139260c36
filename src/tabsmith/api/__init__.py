"""Facade for embedding the table converter.

Usage Example
:
    >>> from tabsmith.api import convert_html
    >>> print(convert_html("<table><tr><td>A</td><td rowspan='2'>B</td></tr></table>"))  # doctest: +NORMALIZE_WHITESPACE
    #table(columns: 2,
      [A], table.cell(rowspan: 2, )[B],
    )
"""

from __future__ import annotations

from .service import ConversionResult, ConversionService, convert_clipboard, convert_html


__all__ = [
    "ConversionResult",
    "ConversionService",
    "convert_clipboard",
    "convert_html",
]
