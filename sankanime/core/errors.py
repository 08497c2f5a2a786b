"""Exception hierarchy and error payloads for sankanime."""

from typing import Optional

import requests

from ..models.types import ErrorPayload

SCHEMA = "1.0.0"


class SankanimeError(Exception):
    """Base exception for all sankanime errors."""


class TransportError(SankanimeError):
    """Raised when the HTTP request fails or the upstream answers non-2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ResponseDecodeError(TransportError):
    """Raised when a 2xx response body is not valid JSON."""


class EmptyResultError(SankanimeError):
    """Raised when the upstream succeeds but returns no usable data."""


class CacheCorruptionError(SankanimeError):
    """Raised when a stored cache record cannot be decoded. Never leaves the home fetch."""


class StorageError(SankanimeError):
    """Raised when the storage document cannot be read or written."""


def err_payload(source: str, code: str, message: str) -> ErrorPayload:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}


def payload_for(source: str, e: Exception) -> ErrorPayload:
    """Map an exception onto the tool error payload."""
    if isinstance(e, ResponseDecodeError):
        return err_payload(source, "BAD_RESPONSE", str(e))
    if isinstance(e, TransportError):
        if e.status_code:
            return err_payload(source, f"UPSTREAM_{e.status_code}", str(e))
        if isinstance(e.__cause__, requests.Timeout):
            return err_payload(source, "TIMEOUT", "Upstream timed out")
        return err_payload(source, "UPSTREAM_0", str(e))
    if isinstance(e, EmptyResultError):
        return err_payload(source, "EMPTY", str(e))
    if isinstance(e, ValueError):
        return err_payload(source, "BAD_REQUEST", str(e))
    return err_payload(source, "UNEXPECTED", str(e))
