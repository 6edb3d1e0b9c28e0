"""Tests for the diagnostic and document model types."""

import pytest

from apidom_validate.model import (
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    TextDocument,
)


# ---------------------------------------------------------------------------
# DiagnosticSeverity
# ---------------------------------------------------------------------------


class TestDiagnosticSeverity:
    def test_language_server_numbering(self):
        assert DiagnosticSeverity.ERROR == 1
        assert DiagnosticSeverity.WARNING == 2
        assert DiagnosticSeverity.INFORMATION == 3
        assert DiagnosticSeverity.HINT == 4

    def test_lookup_by_number(self):
        assert DiagnosticSeverity(2) is DiagnosticSeverity.WARNING


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_defaults(self):
        d = Diagnostic(range=Range(start=Position(0, 0)), message="bad")
        assert d.severity is None
        assert d.code is None
        assert d.source is None
        assert d.range.end is None

    def test_at_builds_single_position_range(self):
        d = Diagnostic.at(4, 9, "bad", code="E1")
        assert d.range.start == Position(line=4, character=9)
        assert d.severity is DiagnosticSeverity.ERROR
        assert d.code == "E1"

    def test_frozen(self):
        d = Diagnostic.at(0, 0, "x")
        with pytest.raises(AttributeError):
            d.message = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# TextDocument
# ---------------------------------------------------------------------------


class TestTextDocument:
    def test_create(self):
        doc = TextDocument.create("api.yaml", "apidom", 0, "openapi: 3.1.0\n")
        assert doc.uri == "api.yaml"
        assert doc.language_id == "apidom"
        assert doc.version == 0
        assert doc.text == "openapi: 3.1.0\n"

    def test_defaults(self):
        doc = TextDocument(uri="api.yaml", text="")
        assert doc.language_id == "apidom"
        assert doc.version == 0
