"""Single-flight coordination: one in-flight call, shared by every concurrent caller."""

import threading
from concurrent.futures import Future
from typing import Callable, Generic, Optional, TypeVar

from loguru import logger

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Runs at most one `fn` at a time; callers arriving meanwhile share its outcome.

    The first caller (the leader) runs `fn` on its own thread. Everyone who
    arrives before it settles blocks on the same Future and gets the same value
    or the same exception object. The pending slot is cleared once the leader
    settles, so a failure is never cached.
    """

    def __init__(self, name: str = "single-flight"):
        self.name = name
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None
        self.started = 0
        self.joined = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def do(self, fn: Callable[[], T]) -> T:
        with self._lock:
            fut = self._pending
            leader = fut is None
            if leader:
                fut = Future()
                self._pending = fut
                self.started += 1
            else:
                self.joined += 1

        if not leader:
            logger.info("[{}] request already in flight, waiting for its result", self.name)
            return fut.result()

        try:
            result = fn()
        except BaseException as e:
            fut.set_exception(e)
            raise
        else:
            fut.set_result(result)
            return result
        finally:
            with self._lock:
                self._pending = None
