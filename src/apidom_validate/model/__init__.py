"""Model layer -- public type re-exports."""

from apidom_validate.model.diagnostic import Diagnostic, DiagnosticSeverity, Position, Range
from apidom_validate.model.document import TextDocument

__all__ = [
    # diagnostic
    "Position",
    "Range",
    "DiagnosticSeverity",
    "Diagnostic",
    # document
    "TextDocument",
]
