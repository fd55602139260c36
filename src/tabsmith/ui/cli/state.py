"""Per-invocation state of the ``tabsmith`` command and its stderr rendering."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings for one command invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def err_console(self) -> Console:
        """Return a stderr console, rebuilt when ``sys.stderr`` is swapped."""
        from rich.console import Console

        current = getattr(self._err_console, "file", None)
        if self._err_console is None or current is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState] = ContextVar("tabsmith_cli_state")


def get_cli_state() -> CLIState:
    """Return the state of the running invocation, creating a default one."""
    try:
        return _STATE_VAR.get()
    except LookupError:
        return set_cli_state()


def set_cli_state(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Start a fresh state for a new invocation and make it current."""
    state = CLIState(verbosity=max(0, verbosity), show_tracebacks=debug)
    _STATE_VAR.set(state)
    return state


def _exception_chain(exc: BaseException) -> list[str]:
    chain: list[str] = []
    visited: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        chain.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or current.__context__
    return chain


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Render a message on stderr.

    Standard output carries only the generated markup. ``info`` messages are
    printed dimmed; errors get the exception type at ``-v`` and the cause
    chain at ``-vv``.
    """
    state = get_cli_state()

    if level == "info":
        state.err_console.print(message, style="dim", markup=False)
        return

    from rich.text import Text

    text = Text.assemble((f"{level}: ", "bold red"), (message, "red"))

    extra_lines: list[str] = []
    if exception is not None and state.verbosity >= 1:
        detail = str(exception).strip()
        if detail and detail not in message:
            extra_lines.append(detail)
        extra_lines.append(f"type: {type(exception).__name__}")
        if state.verbosity >= 2:
            chain = _exception_chain(exception)
            if chain:
                extra_lines.append("caused by:")
                extra_lines.extend(f"  {entry}" for entry in chain)

    if extra_lines:
        text.append("\n")
        text.append("\n".join(extra_lines), style="red")

    state.err_console.print(text)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Print an error on stderr."""
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether ``--debug`` asked for full tracebacks."""
    return get_cli_state().show_tracebacks
