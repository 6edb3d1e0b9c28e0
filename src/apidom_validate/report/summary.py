"""Aggregate a diagnostic sequence into counts and a one-line summary."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from apidom_validate.model.diagnostic import Diagnostic, DiagnosticSeverity
from apidom_validate.report.severity import counted_severity


@dataclass(frozen=True)
class Summary:
    """Counts for one report plus the rendered summary message."""

    problem_count: int
    error_count: int
    warning_count: int
    message: str

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun if count == 1 else noun + 's'}"


def create_summary(diagnostics: Sequence[Diagnostic]) -> Summary:
    """Count problems, errors and warnings in *diagnostics*.

    Diagnostics with no severity are counted as errors.
    """
    counts = Counter(counted_severity(d.severity) for d in diagnostics)
    problem_count = len(diagnostics)
    error_count = counts[DiagnosticSeverity.ERROR]
    warning_count = counts[DiagnosticSeverity.WARNING]

    details = ", ".join([_plural(error_count, "error"), _plural(warning_count, "warning")])
    message = f"✖ {_plural(problem_count, 'problem')} ({details})"

    return Summary(
        problem_count=problem_count,
        error_count=error_count,
        warning_count=warning_count,
        message=message,
    )
