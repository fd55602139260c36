"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from pathlib import Path
import sys


def stdin_is_piped() -> bool:
    """Return True when stdin is an open, non-interactive stream."""
    stream = sys.stdin
    if stream is None or stream.closed:
        return False
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return False


def read_stdin() -> str:
    """Return everything piped on stdin, or an empty string."""
    if not stdin_is_piped():
        return ""
    return sys.stdin.read()


def read_input_file(path: Path) -> str:
    """Read an HTML document from disk, or from stdin for ``-``."""
    if str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return path.read_text(encoding="utf-8", errors="replace")


def write_output_file(target: Path, content: str) -> None:
    """Persist Typst content to disk, creating parent directories as needed."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem errors
        raise OSError(f"Failed to write Typst output to '{target}': {exc}") from exc


__all__ = ["read_input_file", "read_stdin", "stdin_is_piped", "write_output_file"]
