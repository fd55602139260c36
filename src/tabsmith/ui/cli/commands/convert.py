"""Implementation of the primary ``tabsmith`` CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from tabsmith.api.service import ConversionResult, ConversionService
from tabsmith.core.config import ConfigError, ConverterConfig, load_config
from tabsmith.core.exceptions import ClipboardError, TableConversionError
from tabsmith.version import get_version

from .._options import (
    ClipboardOption,
    ConfigOption,
    DebugOption,
    IndentOption,
    InputPathArgument,
    OutputPathOption,
    ParserOption,
    StrictSpansOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, set_cli_state
from ..utils import read_input_file, read_stdin, write_output_file


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def resolve_config(
    config_path: Path | None,
    *,
    parser: str | None = None,
    indent: str | None = None,
    strict_spans: bool = False,
) -> ConverterConfig:
    """Merge the optional YAML configuration with command-line overrides."""
    base = load_config(config_path) if config_path is not None else ConverterConfig()
    return base.merged(
        parser=parser,
        indent=indent,
        span_policy="strict" if strict_spans else None,
    )


def _convert_source(
    service: ConversionService,
    input_path: Path | None,
    clipboard: bool,
) -> ConversionResult:
    if clipboard:
        return service.convert_clipboard()
    if input_path is not None:
        return service.convert(read_input_file(input_path))
    piped = read_stdin()
    if piped.strip():
        return service.convert(piped)
    return service.convert_clipboard()


def convert(
    input_path: InputPathArgument = None,
    output: OutputPathOption = None,
    clipboard: ClipboardOption = False,
    parser: ParserOption = None,
    indent: IndentOption = None,
    strict_spans: StrictSpansOption = False,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Print the tabsmith version and exit.",
        ),
    ] = False,
) -> None:
    """Convert the first HTML table of a document or the clipboard into Typst markup."""

    state = set_cli_state(verbosity=verbose, debug=debug)

    if clipboard and input_path is not None:
        raise typer.BadParameter("Provide either an INPUT document or --clipboard, not both.")

    try:
        settings = resolve_config(
            config, parser=parser, indent=indent, strict_spans=strict_spans
        )
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    service = ConversionService(settings, emitter=CliEmitter(state))

    try:
        result = _convert_source(service, input_path, clipboard)
    except (ClipboardError, TableConversionError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(result.markup)
        return

    try:
        write_output_file(output, result.markup)
    except OSError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    if state.verbosity >= 1:
        state.err_console.print(f"Wrote {result.rows} row(s) to {output}", markup=False)


__all__ = ["convert", "resolve_config"]
