"""Default language service: OpenAPI 2.0 / 3.0 / 3.1 validation.

Documents are parsed with :mod:`yaml`, falling back to :mod:`json` for JSON
that YAML rejects, and checked against the matching OpenAPI schema with
:mod:`openapi_spec_validator`. Every problem is reported as an error-severity
diagnostic, dangling ``$ref`` targets included.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from openapi_spec_validator import (
    OpenAPIV2SpecValidator,
    OpenAPIV30SpecValidator,
    OpenAPIV31SpecValidator,
)
from referencing.exceptions import Unresolvable

from apidom_validate.errors import LanguageServiceError
from apidom_validate.language_service.loader import LoadedDocument, load_document
from apidom_validate.model.diagnostic import Diagnostic, DiagnosticSeverity, Position, Range
from apidom_validate.model.document import TextDocument
from apidom_validate.source import is_url

logger = logging.getLogger("apidom_validate.language_service")

SOURCE = "apidom-validate"

YAML_SYNTAX = "yaml-syntax"
UNSUPPORTED_DOCUMENT = "unsupported-document"
UNRESOLVABLE_REF = "unresolvable-ref"


def detect_validator(data: Any) -> type | None:
    """Pick the spec validator class for *data*, or ``None`` if it is not an API description."""
    if not isinstance(data, Mapping):
        return None
    if "openapi" in data:
        version = str(data["openapi"])
        if version.startswith("3.1"):
            return OpenAPIV31SpecValidator
        if version.startswith("3.0"):
            return OpenAPIV30SpecValidator
        return None
    if str(data.get("swagger", "")) == "2.0":
        return OpenAPIV2SpecValidator
    return None


def _base_uri(uri: str) -> str:
    if is_url(uri):
        return uri
    return Path(uri).resolve().as_uri()


def _error_code(error: Any) -> str:
    # OpenAPI semantic errors carry no schema keyword.
    keyword = getattr(error, "validator", None)
    if isinstance(keyword, str):
        return keyword
    return type(error).__name__


class OpenAPILanguageService:
    """Validate OpenAPI and Swagger documents, reporting positioned diagnostics."""

    def do_validation(self, document: TextDocument) -> list[Diagnostic]:
        logger.debug(
            "Validating %s (language=%s, version=%d, %d chars)",
            document.uri,
            document.language_id,
            document.version,
            len(document.text),
        )
        try:
            loaded = load_document(document.text)
        except yaml.YAMLError as exc:
            return [self._syntax_diagnostic(exc)]

        validator_cls = detect_validator(loaded.data)
        if validator_cls is None:
            logger.debug("No OpenAPI or Swagger version field in %s", document.uri)
            return [
                Diagnostic(
                    range=Range(start=loaded.locate(())),
                    message="Document is not a supported OpenAPI (3.0, 3.1) or Swagger (2.0) definition",
                    severity=DiagnosticSeverity.ERROR,
                    code=UNSUPPORTED_DOCUMENT,
                    source=SOURCE,
                )
            ]

        logger.debug("Using %s for %s", validator_cls.__name__, document.uri)
        diagnostics = list(self._schema_diagnostics(validator_cls, loaded, document.uri))
        logger.debug("%s: %d diagnostic(s)", document.uri, len(diagnostics))
        return diagnostics

    def _schema_diagnostics(
        self, validator_cls: type, loaded: LoadedDocument, uri: str
    ) -> Iterator[Diagnostic]:
        errors: list[Any] = []
        unresolved: Unresolvable | None = None
        try:
            validator = validator_cls(loaded.data, base_uri=_base_uri(uri))
            for error in validator.iter_errors():
                errors.append(error)
        except Unresolvable as exc:
            # A dangling $ref is a document defect; the validator stops at the first one.
            logger.debug("Unresolvable reference in %s: %r", uri, getattr(exc, "ref", None))
            unresolved = exc
        except Exception as exc:
            raise LanguageServiceError(
                f"Validation of {uri} failed: {exc}", cause=exc
            ) from exc

        for error in errors:
            start = loaded.locate(getattr(error, "absolute_path", ()))
            yield Diagnostic(
                range=Range(start=start),
                message=error.message,
                severity=DiagnosticSeverity.ERROR,
                code=_error_code(error),
                source=SOURCE,
            )
        if unresolved is not None:
            yield self._unresolved_diagnostic(unresolved, loaded)

    @staticmethod
    def _unresolved_diagnostic(exc: Unresolvable, loaded: LoadedDocument) -> Diagnostic:
        ref = str(getattr(exc, "ref", "") or "")
        start = (loaded.locate_ref(ref) if ref else None) or loaded.locate(())
        return Diagnostic(
            range=Range(start=start),
            message=f"Could not resolve reference '{ref}'" if ref else "Could not resolve reference",
            severity=DiagnosticSeverity.ERROR,
            code=UNRESOLVABLE_REF,
            source=SOURCE,
        )

    @staticmethod
    def _syntax_diagnostic(exc: yaml.YAMLError) -> Diagnostic:
        mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
        start = Position(line=mark.line, character=mark.column) if mark else Position(0, 0)
        message = getattr(exc, "problem", None) or str(exc)
        return Diagnostic(
            range=Range(start=start),
            message=message,
            severity=DiagnosticSeverity.ERROR,
            code=YAML_SYNTAX,
            source=SOURCE,
        )
