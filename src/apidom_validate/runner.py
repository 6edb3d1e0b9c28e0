"""Validation driver: read a document, validate it, report, and pick an exit status."""
from __future__ import annotations

import logging
from enum import IntEnum

import click
import httpx

from apidom_validate.config import ValidateConfig
from apidom_validate.language_service import LanguageService, get_language_service
from apidom_validate.model.diagnostic import Diagnostic
from apidom_validate.model.document import TextDocument
from apidom_validate.report import print_diagnostics
from apidom_validate.source import read_document

logger = logging.getLogger("apidom_validate.runner")


class ExitStatus(IntEnum):
    OK = 0
    FAILURE = 1


def validate_file(
    location: str,
    config: ValidateConfig | None = None,
    *,
    service: LanguageService | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[Diagnostic]:
    """Read the document at *location* and return the language service's diagnostics."""
    config = config or ValidateConfig()
    text = read_document(
        location,
        encoding=config.encoding,
        timeout=config.http_timeout,
        transport=transport,
    )
    document = TextDocument.create(location, config.language_id, config.document_version, text)
    service = service or get_language_service()
    return list(service.do_validation(document))


def run(
    location: str,
    config: ValidateConfig | None = None,
    *,
    service: LanguageService | None = None,
    transport: httpx.BaseTransport | None = None,
) -> ExitStatus:
    """Validate *location*, print the outcome, and return the exit status.

    ``OK`` only when the document produced no diagnostics at all; any
    diagnostic or any error while reading or validating is a ``FAILURE``.
    """
    config = config or ValidateConfig()
    try:
        diagnostics = validate_file(location, config, service=service, transport=transport)
    except Exception as exc:
        logger.debug("Validation of %s aborted", location, exc_info=True)
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True, color=config.color)
        return ExitStatus.FAILURE

    if not diagnostics:
        click.echo(click.style("Everything is OK", fg="green"), color=config.color)
        return ExitStatus.OK

    print_diagnostics(diagnostics, location, color=config.color)
    return ExitStatus.FAILURE
