"""Language services that turn a text document into diagnostics."""

from __future__ import annotations

from apidom_validate.language_service.base import LanguageService
from apidom_validate.language_service.openapi import OpenAPILanguageService


def get_language_service() -> LanguageService:
    """Return the default language service."""
    return OpenAPILanguageService()


__all__ = [
    "LanguageService",
    "OpenAPILanguageService",
    "get_language_service",
]
