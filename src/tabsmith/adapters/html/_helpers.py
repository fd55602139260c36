"""Internal helpers for reading BeautifulSoup nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bs4.element import Tag


def coerce_attribute(value: Any) -> str | None:
    """Normalise a BeautifulSoup attribute value to a string when possible."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(value, Iterable):
        for item in value:
            if isinstance(item, str):
                return item
    return None


def span_attribute(cell: Tag, name: str) -> str | None:
    """Return a span attribute as written, or ``None`` when it is missing or empty."""
    return coerce_attribute(cell.get(name)) or None


def owning_table(node: Tag) -> Tag | None:
    """Return the nearest ``<table>`` ancestor of a node."""
    return node.find_parent("table")


def is_descendant(node: Tag, ancestor: Tag) -> bool:
    """Return True when ``ancestor`` encloses ``node``."""
    return any(parent is ancestor for parent in node.parents)
