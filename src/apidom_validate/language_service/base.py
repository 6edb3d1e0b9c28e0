"""Language service protocol definition."""

from __future__ import annotations

from typing import Protocol

from apidom_validate.model.diagnostic import Diagnostic
from apidom_validate.model.document import TextDocument


class LanguageService(Protocol):
    """Protocol for engines that validate a document and report diagnostics."""

    def do_validation(self, document: TextDocument) -> list[Diagnostic]: ...
