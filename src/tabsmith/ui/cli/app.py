"""Console entry point for the ``tabsmith`` command."""

from __future__ import annotations

import typer

from tabsmith.ui.cli.commands.convert import convert

from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Convert HTML tables into Typst markup.",
    add_completion=False,
    context_settings={"help_option_names": ["--help"]},
)
app.command()(convert)


def main() -> None:
    """Run the command, reporting unexpected failures on stderr."""
    try:
        app()
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except (typer.Exit, SystemExit):
        raise
    except Exception as exc:  # pragma: no cover
        state = get_cli_state()
        if not state.show_tracebacks:
            emit_error(str(exc), exception=exc)
            raise typer.Exit(code=1) from exc

        from rich.traceback import Traceback

        state.err_console.print(
            Traceback.from_exception(
                type(exc), exc, exc.__traceback__, show_locals=state.verbosity >= 2
            )
        )
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
