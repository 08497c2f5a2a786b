"""Core functionality for sankanime."""

from .errors import (
    SankanimeError, TransportError, EmptyResultError, CacheCorruptionError, StorageError, ResponseDecodeError,
    err_payload, payload_for,
)
from .http_client import http_get, get_json
from .request import unwrap, execute
from .storage import Storage, MemoryStorage, FileStorage
from .cache import HomeCache, cache_key
from .single_flight import SingleFlight
from .home import HomeAggregate

__all__ = [
    "SankanimeError", "TransportError", "EmptyResultError", "CacheCorruptionError", "StorageError", "ResponseDecodeError",
    "err_payload", "payload_for",
    "http_get", "get_json",
    "unwrap", "execute",
    "Storage", "MemoryStorage", "FileStorage",
    "HomeCache", "cache_key",
    "SingleFlight",
    "HomeAggregate",
]
