"""HTML input adapters."""

from __future__ import annotations

from .parser import DEFAULT_PARSER, FALLBACK_PARSER, load_soup, parse_table, read_table


__all__ = ["DEFAULT_PARSER", "FALLBACK_PARSER", "load_soup", "parse_table", "read_table"]
