"""Home aggregate fetch: persistent cache behind a single-flight coordinator."""

from typing import Any, Callable

from loguru import logger

from .cache import HomeCache
from .errors import CacheCorruptionError, EmptyResultError
from .request import execute
from .single_flight import SingleFlight


class HomeAggregate:
    """Owns the pending-operation slot for the home endpoint.

    `fetch` performs one transport call for the home payload. It only runs when
    no fresh cache record exists, and never twice concurrently.
    """

    def __init__(self, fetch: Callable[[], Any], cache: HomeCache):
        self._fetch = fetch
        self.cache = cache
        self._flight: SingleFlight[Any] = SingleFlight("home")

    @property
    def pending(self) -> bool:
        return self._flight.pending

    def get_home_aggregate(self) -> Any:
        return self._flight.do(self._resolve)

    def _read_cache(self) -> Any:
        try:
            return self.cache.read()
        except CacheCorruptionError as e:
            logger.warning("Failed to parse home cache, fetching fresh data: {}", e)
            self.cache.evict()
            return None

    def _resolve(self) -> Any:
        cached = self._read_cache()
        if cached is not None:
            logger.info("Serving home data from cache ({})", self.cache.key)
            return cached

        logger.info("Fetching home data from the API")
        results = execute(self._fetch, "Failed to fetch home data from the API")
        if not results:
            logger.error("Home endpoint returned no data")
            raise EmptyResultError("API returned empty home data")

        self.cache.write(results)
        return results
