"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="[INPUT]",
        help=(
            "HTML document containing the table, or '-' for stdin. "
            "Reads the system clipboard when omitted and nothing is piped."
        ),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        allow_dash=True,
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ClipboardOption = Annotated[
    bool,
    typer.Option(
        "--clipboard",
        "-c",
        help="Read the HTML table from the system clipboard.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ParserOption = Annotated[
    str | None,
    typer.Option(
        "--parser",
        help='BeautifulSoup parser backend to use (defaults to "lxml").',
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="YAML file providing converter settings. Command-line flags take precedence.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

IndentOption = Annotated[
    str | None,
    typer.Option(
        "--indent",
        help="Prefix written before each table row (defaults to two spaces).",
        show_default=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

StrictSpansOption = Annotated[
    bool,
    typer.Option(
        "--strict-spans",
        help="Reject rowspan/colspan values that are not positive integers.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file. Defaults to stdout.",
        dir_okay=False,
        show_default=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
