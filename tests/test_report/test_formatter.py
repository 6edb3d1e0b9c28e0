"""Tests for single-line diagnostic formatting."""

import click

from apidom_validate.model import Diagnostic, DiagnosticSeverity, Position, Range
from apidom_validate.report import format_diagnostic


def _plain(diagnostic: Diagnostic) -> str:
    return click.unstyle(format_diagnostic(diagnostic))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestLayout:
    def test_full_line(self):
        d = Diagnostic.at(0, 0, "bad", code="E1")
        assert _plain(d) == "  1:1  error  bad  E1"

    def test_positions_are_one_based(self):
        d = Diagnostic.at(4, 9, "bad", severity=DiagnosticSeverity.WARNING)
        assert _plain(d).startswith("  5:10  ")

    def test_missing_code_leaves_no_trailing_separator(self):
        d = Diagnostic.at(2, 3, "bad")
        line = _plain(d)
        assert line == "  3:4  error  bad"
        assert not line.endswith(" ")

    def test_numeric_code(self):
        d = Diagnostic.at(0, 0, "bad", code=3001)
        assert _plain(d) == "  1:1  error  bad  3001"

    def test_end_position_is_ignored(self):
        d = Diagnostic(
            range=Range(start=Position(1, 1), end=Position(8, 8)),
            message="bad",
            severity=DiagnosticSeverity.HINT,
        )
        assert _plain(d) == "  2:2  hint  bad"

    def test_no_trailing_newline(self):
        assert not format_diagnostic(Diagnostic.at(0, 0, "bad")).endswith("\n")

    def test_message_is_verbatim(self):
        d = Diagnostic.at(0, 0, "'info' is a required property  (see #/info)")
        assert "'info' is a required property  (see #/info)" in _plain(d)


# ---------------------------------------------------------------------------
# Severity labels and colors
# ---------------------------------------------------------------------------


class TestSeveritySegment:
    def test_missing_severity_renders_unknown(self):
        d = Diagnostic.at(0, 0, "bad", severity=None)
        assert _plain(d) == "  1:1  unknown  bad"

    def test_out_of_range_severity_renders_unknown(self):
        d = Diagnostic.at(0, 0, "bad", severity=9)
        assert _plain(d) == "  1:1  unknown  bad"

    def test_error_is_red(self):
        line = format_diagnostic(Diagnostic.at(0, 0, "bad"))
        assert click.style("error", fg="red") in line

    def test_warning_is_yellow(self):
        line = format_diagnostic(Diagnostic.at(0, 0, "bad", severity=DiagnosticSeverity.WARNING))
        assert click.style("warning", fg="yellow") in line

    def test_unknown_is_yellow(self):
        line = format_diagnostic(Diagnostic.at(0, 0, "bad", severity=None))
        assert click.style("unknown", fg="yellow") in line

    def test_position_and_code_are_gray(self):
        line = format_diagnostic(Diagnostic.at(0, 0, "bad", code="E1"))
        assert click.style("1:1", fg="bright_black") in line
        assert click.style("E1", fg="bright_black") in line
