"""Document source: read an input document from disk or over HTTP."""
from __future__ import annotations

import logging
from pathlib import Path

import httpx

from apidom_validate.errors import DocumentReadError

logger = logging.getLogger("apidom_validate.source")

_URL_SCHEMES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(_URL_SCHEMES)


def read_document(
    location: str,
    *,
    encoding: str = "utf-8",
    timeout: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Return the text of the document at *location*, a file path or http(s) URL.

    Raises :class:`DocumentReadError` when the document cannot be read.
    """
    if is_url(location):
        return _fetch(location, timeout=timeout, transport=transport)
    return _read_file(location, encoding=encoding)


def _read_file(path: str, *, encoding: str) -> str:
    logger.debug("Reading %s as %s", path, encoding)
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(str(exc), location=path, cause=exc) from exc


def _fetch(
    url: str,
    *,
    timeout: float,
    transport: httpx.BaseTransport | None,
) -> str:
    logger.debug("Fetching %s (timeout=%.1fs)", url, timeout)
    try:
        with httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        ) as client:
            resp = client.get(url)
    except httpx.TimeoutException as exc:
        raise DocumentReadError(f"Timed out fetching {url}", location=url, cause=exc) from exc
    except httpx.HTTPError as exc:
        raise DocumentReadError(f"Could not fetch {url}: {exc}", location=url, cause=exc) from exc

    if resp.status_code >= 300:
        raise DocumentReadError(
            f"Could not fetch {url}: HTTP {resp.status_code}",
            location=url,
            status_code=resp.status_code,
        )
    return resp.text
