"""Severity resolution for display and for counting.

A diagnostic without a severity is shown as ``unknown`` but counted as an
error. Each rule has its own resolver.
"""

from __future__ import annotations

from typing import Final

from apidom_validate.model.diagnostic import DiagnosticSeverity

UNKNOWN_LABEL: Final = "unknown"

SEVERITY_LABELS: Final[dict[DiagnosticSeverity, str]] = {
    DiagnosticSeverity.ERROR: "error",
    DiagnosticSeverity.WARNING: "warning",
    DiagnosticSeverity.INFORMATION: "info",
    DiagnosticSeverity.HINT: "hint",
}


def severity_label(severity: DiagnosticSeverity | int | None) -> str:
    """Return the display label for *severity*, ``unknown`` for anything unmapped."""
    if severity is None:
        return UNKNOWN_LABEL
    return SEVERITY_LABELS.get(severity, UNKNOWN_LABEL)


def counted_severity(severity: DiagnosticSeverity | int | None) -> DiagnosticSeverity | int:
    """Return the severity a diagnostic is tallied under; absent means error."""
    if severity is None:
        return DiagnosticSeverity.ERROR
    return severity
