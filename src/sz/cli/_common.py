"""Shared CLI helpers."""

from rich.console import Console

PROG_NAME = "sz"

console = Console()
err_console = Console(stderr=True)
