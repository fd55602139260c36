"""Command implementations for the tabsmith CLI."""

from __future__ import annotations

from .convert import convert


__all__ = ["convert"]
