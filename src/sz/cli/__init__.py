"""CLI entry point.

``main`` runs the command in non-standalone mode so option errors can be
reported the classic way (``sz: <message>`` plus a help hint, exit 1)
instead of click's default exit status 2.
"""

import sys
from typing import List, Optional, Type

import typer

from ._common import PROG_NAME

app = typer.Typer(
    name=PROG_NAME,
    help="sz - report how much each declaration contributes to a managed module",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Import the command to register it
from .analyze import analyze as _analyze  # noqa: F401, E402


def _usage_error_class() -> Type[Exception]:
    """The UsageError base of whichever click build typer raises from.

    Newer typer releases bundle their own click under ``typer._click``, so
    ``click.UsageError`` from the standalone package no longer matches.
    """
    for cls in typer.BadParameter.__mro__:
        if cls.__name__ == "UsageError":
            return cls
    return typer.BadParameter


UsageError = _usage_error_class()


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    command = typer.main.get_command(app)
    try:
        result = command.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except UsageError as e:
        typer.echo(f"{PROG_NAME}: {e.format_message()}", err=True)
        typer.echo(f"Try `{PROG_NAME} --help' for more information.", err=True)
        return 1
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0
