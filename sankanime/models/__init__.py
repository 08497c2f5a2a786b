"""Models and type definitions for sankanime."""

from .types import Result, CacheEntry, ErrorBody, ErrorPayload

__all__ = ["Result", "CacheEntry", "ErrorBody", "ErrorPayload"]
