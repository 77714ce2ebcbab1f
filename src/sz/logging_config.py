"""
Logging configuration for sz.

Log records go to stderr through rich so they never mix with the text or
JSON report on stdout. The metadata libraries (dnfile, pefile) report
recoverable heap quirks as warnings; those stay hidden unless ``--verbose``
is given, since sz itself fails hard on anything it cannot resolve.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ConfigurationError

METADATA_LIBRARIES = ("dnfile", "pefile")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: str) -> logging.Handler:
    try:
        handler = logging.FileHandler(log_file, mode="a")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot open log file: {log_file}", details={"path": log_file, "reason": str(e)}
        ) from e
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for a run.

    Args:
        verbose: DEBUG for sz and the metadata libraries, with source paths
        quiet: Only errors
        log_file: Optional file that also receives every record

    Returns:
        The ``sz`` logger

    Raises:
        ConfigurationError: If ``log_file`` cannot be opened for appending
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    # Open the file first so a bad path leaves logging untouched.
    handlers: list[logging.Handler] = []
    if log_file:
        handlers.append(_file_handler(log_file))

    handlers.insert(
        0,
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Metadata names such as TypeDef[3] would parse as markup.
            markup=False,
            show_time=True,
            show_path=verbose,
        ),
    )

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    library_level = logging.DEBUG if verbose else logging.ERROR
    for name in METADATA_LIBRARIES:
        logging.getLogger(name).setLevel(library_level)

    logger = logging.getLogger("sz")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the logger for an sz module.

    Args:
        name: Module name (e.g., 'sz.sizing.builder'); names outside the
              ``sz`` namespace are moved under it. None returns the ``sz``
              logger itself.
    """
    if name is None:
        return logging.getLogger("sz")

    if name != "sz" and not name.startswith("sz."):
        name = f"sz.{name}"

    return logging.getLogger(name)
