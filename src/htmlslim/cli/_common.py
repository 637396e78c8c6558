"""Console, logging and reporting helpers for the CLI."""

import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler

from htmlslim.exceptions import HtmlSlimError
from htmlslim.models import SlimResult

console = Console(stderr=True)

PACKAGE_LOGGER = "htmlslim"


def configure_logging(*, verbose: bool = False) -> None:
    """
    Send htmlslim log records to a Rich handler on stderr.

    Only the package logger is configured; the root logger is left to the
    host application. Calling again replaces the previous handler.

    Args:
        verbose: Log at DEBUG instead of WARNING, with locals in tracebacks.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    logger.addHandler(
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
            log_time_format="[%X]",
        )
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def fail(error: HtmlSlimError) -> NoReturn:
    """Report a configuration or input problem and exit with status 1."""
    click.echo(f"Error: {error.message}", err=True)
    raise SystemExit(1)


def echo_stats(result: SlimResult) -> None:
    """Print one line of removal statistics to stderr."""
    s = result.stats
    click.echo(
        f"Removed {s.elements_removed} elements, {s.comments_removed} comments, "
        f"{s.attributes_removed} attributes; merged {s.texts_merged} text nodes "
        f"({result.input_length} -> {result.output_length} characters)",
        err=True,
    )
