"""Errors raised by the audit engine."""

from typing import Optional


class AuditError(Exception):
    """Base class for all audit failures."""


class ValidationError(AuditError, ValueError):
    """The URL is malformed or points at a host we refuse to audit."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FetchError(AuditError):
    """The page could not be retrieved (network error or timeout)."""

    def __init__(self, url: str, cause: str):
        super().__init__(f"Failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause
