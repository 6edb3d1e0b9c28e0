"""Render one diagnostic as a single report line."""

from __future__ import annotations

import click

from apidom_validate.model.diagnostic import Diagnostic
from apidom_validate.report.severity import severity_label

PADDING = " " * 2


def _gray(text: str) -> str:
    return click.style(text, fg="bright_black")


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Format *diagnostic* as ``  <line>:<col>  <severity>  <message>  <code>``.

    Line and column are one-based. Empty segments, including a missing code,
    are left out rather than rendered as blanks.
    """
    start = diagnostic.range.start
    position = f"{start.line + 1}:{start.character + 1}"
    label = severity_label(diagnostic.severity)
    color = "red" if label == "error" else "yellow"

    segments = [
        _gray(position),
        click.style(label, fg=color),
        diagnostic.message,
    ]
    if diagnostic.code is not None and diagnostic.code != "":
        segments.append(_gray(str(diagnostic.code)))

    return PADDING + PADDING.join(s for s in segments if s)
