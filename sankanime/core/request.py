"""Response unwrapping and the shared request executor."""

from typing import Any, Callable, Mapping

from loguru import logger


def unwrap(payload: Any) -> Any:
    """Return `payload["results"]` when present and not None, else the payload itself."""
    if isinstance(payload, Mapping):
        results = payload.get("results")
        if results is not None:
            return results
    return payload


def execute(call: Callable[[], Any], context: str) -> Any:
    """Run one transport call and unwrap it.

    Failures are logged with `context` and re-raised as-is, so callers can
    tell "no data" apart from "failed".
    """
    try:
        payload = call()
    except Exception as e:
        logger.opt(exception=e).error("{}: {}", context, e)
        raise
    return unwrap(payload)
