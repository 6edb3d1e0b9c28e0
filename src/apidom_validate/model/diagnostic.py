"""Diagnostic model: positioned findings reported by a language service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DiagnosticSeverity(IntEnum):
    """Severity level for a diagnostic, numbered as in the language server protocol."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


@dataclass(frozen=True)
class Position:
    """A zero-based line/character offset into a document."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position | None = None


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found in a document.

    Attributes:
        range: Where the problem is. Only ``range.start`` is displayed.
        message: Human-readable description of the problem.
        severity: How serious the issue is. ``None`` when the engine did not
            say; a plain ``int`` outside :class:`DiagnosticSeverity` is kept
            as-is.
        code: Engine-specific identifier of the check that failed.
        source: Name of the engine that produced the diagnostic.
    """

    range: Range
    message: str
    severity: DiagnosticSeverity | int | None = None
    code: str | int | None = None
    source: str | None = None

    @classmethod
    def at(
        cls,
        line: int,
        character: int,
        message: str,
        severity: DiagnosticSeverity | int | None = DiagnosticSeverity.ERROR,
        code: str | int | None = None,
        source: str | None = None,
    ) -> Diagnostic:
        """Build a diagnostic anchored at a single zero-based position."""
        return cls(
            range=Range(start=Position(line=line, character=character)),
            message=message,
            severity=severity,
            code=code,
            source=source,
        )
