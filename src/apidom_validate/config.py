from __future__ import annotations

from dataclasses import dataclass

from apidom_validate.model.document import DEFAULT_LANGUAGE_ID


@dataclass(frozen=True)
class ValidateConfig:
    language_id: str = DEFAULT_LANGUAGE_ID
    document_version: int = 0
    encoding: str = "utf-8"
    http_timeout: float = 10.0
    color: bool | None = None  # None: let click detect a terminal
    verbose: bool = False
