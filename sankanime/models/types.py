"""Type definitions for sankanime."""

from typing import Any, TypedDict

# Upstream payloads are opaque JSON; nothing in the core looks inside them.
Result = Any


class CacheEntry(TypedDict):
    data: Result
    timestamp: int      # epoch ms when `data` was stored


class ErrorBody(TypedDict):
    code: str
    message: str
    source: str


class ErrorPayload(TypedDict):
    schemaVersion: str
    error: ErrorBody
