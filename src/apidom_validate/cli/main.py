"""apidom-validate CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from apidom_validate import __version__
from apidom_validate.config import ValidateConfig
from apidom_validate.runner import run


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if verbose:
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("apidom_validate").setLevel(level)


@click.command()
@click.version_option(version=__version__, prog_name="apidom-validate")
@click.argument("input_path", metavar="INPUT")
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable colored output (default: only on a terminal).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
@click.option(
    "--timeout",
    type=float,
    default=ValidateConfig.http_timeout,
    show_default=True,
    help="Timeout in seconds when INPUT is an http(s) URL.",
)
def cli(input_path: str, color: bool | None, verbose: bool, timeout: float) -> None:
    """Validate Apidom files.

    INPUT is the path to the Apidom file to validate, or an http(s) URL.
    Prints diagnostics and exits with code 0 if there are none, or code 1
    if there are any or the file could not be validated.
    """
    _configure_logging(verbose)
    config = ValidateConfig(http_timeout=timeout, color=color, verbose=verbose)
    status = run(input_path, config)
    sys.exit(int(status))
