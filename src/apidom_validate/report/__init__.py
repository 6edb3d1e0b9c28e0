"""Report rendering: severity labels, diagnostic lines, summaries."""

from apidom_validate.report.formatter import format_diagnostic
from apidom_validate.report.printer import print_diagnostics
from apidom_validate.report.severity import SEVERITY_LABELS, counted_severity, severity_label
from apidom_validate.report.summary import Summary, create_summary

__all__ = [
    "SEVERITY_LABELS",
    "Summary",
    "counted_severity",
    "create_summary",
    "format_diagnostic",
    "print_diagnostics",
    "severity_label",
]
