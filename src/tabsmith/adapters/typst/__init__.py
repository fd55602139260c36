"""Typst output adapters."""

from __future__ import annotations

from .formatter import TypstFormatter


__all__ = ["TypstFormatter"]
