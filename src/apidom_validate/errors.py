"""Error hierarchy for apidom-validate."""
from __future__ import annotations


class ApidomValidateError(Exception):
    """Base error for all apidom_validate errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DocumentReadError(ApidomValidateError):
    """The input document could not be read or fetched."""

    def __init__(
        self,
        message: str,
        *,
        location: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.location = location
        self.status_code = status_code


class LanguageServiceError(ApidomValidateError):
    """The language service failed while validating a document.

    An invalid document is not an error: it produces diagnostics.
    """
