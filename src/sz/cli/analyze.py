"""The sz command: read a module, build its size tree, render it."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..config import load_config
from ..exceptions import SzError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..metadata import read_module
from ..sizing import build_module_tree
from ..visualization import generate_report
from . import app
from ._common import console, err_console


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        help="Path to the module (.dll/.exe) to analyze",
        show_default=False,
    ),
    html: bool = typer.Option(
        False,
        "--html",
        help="Write an interactive HTML treemap instead of the text report",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the size tree as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
):
    """
    Report how much each namespace, type and member contributes to a module.

    By default prints one line per type with the sum of its fields, methods
    and properties, followed by the module total.

    [bold cyan]Examples:[/bold cyan]

      sz MyLibrary.dll

      sz --html MyLibrary.dll

      sz --json MyLibrary.dll > sizes.json
    """
    if html and json_output:
        raise typer.BadParameter("cannot be combined with --json", param_hint="'--html'")

    logger = get_logger()
    try:
        settings = load_config(config_file=config, verbose=verbose)
        logger = setup_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_file=settings.log_file
        )

        metadata = read_module(path)
        module = build_module_tree(metadata)

        if html:
            report_path = generate_report(module, output_path=settings.output_path)
            console.print(f"Report saved to: [bold green]{escape(report_path)}[/bold green]")
        elif json_output:
            get_formatter("json", indent=settings.json_indent).render(module)
        else:
            get_formatter("text").render(module)

    except SzError as e:
        logger.debug("sz failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
