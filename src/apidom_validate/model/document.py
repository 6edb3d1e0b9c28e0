"""Text document handed to a language service."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LANGUAGE_ID = "apidom"


@dataclass(frozen=True)
class TextDocument:
    """An in-memory document: its identifier, language tag, version and content."""

    uri: str
    text: str
    language_id: str = DEFAULT_LANGUAGE_ID
    version: int = 0

    @classmethod
    def create(
        cls,
        uri: str,
        language_id: str,
        version: int,
        text: str,
    ) -> TextDocument:
        return cls(uri=uri, text=text, language_id=language_id, version=version)
