"""Print a full diagnostic report for one document."""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO

import click

from apidom_validate.model.diagnostic import Diagnostic
from apidom_validate.report.formatter import format_diagnostic
from apidom_validate.report.summary import create_summary


def print_diagnostics(
    diagnostics: Sequence[Diagnostic],
    uri: str,
    *,
    file: IO[str] | None = None,
    color: bool | None = None,
) -> None:
    """Print *diagnostics* for *uri*: header, one line each, then a summary.

    Nothing is printed for an empty sequence. Diagnostics without a severity
    get no line of their own but still count in the summary.
    """
    if not diagnostics:
        return

    click.echo(click.style(uri, underline=True), file=file, color=color)

    for diagnostic in diagnostics:
        if diagnostic.severity is None:
            continue
        click.echo(format_diagnostic(diagnostic), file=file, color=color)

    summary = create_summary(diagnostics)
    summary_color = "red" if summary.has_errors else "yellow"
    click.echo(file=file, color=color)
    click.echo(click.style(summary.message, fg=summary_color, bold=True), file=file, color=color)
