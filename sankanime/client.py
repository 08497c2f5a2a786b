"""Endpoint functions for the sankanime catalog API."""

from typing import Any, Dict, Optional

from .config import AppSettings, settings as default_settings
from .core.cache import HomeCache
from .core.home import HomeAggregate
from .core.http_client import get_json
from .core.request import execute
from .core.storage import FileStorage, Storage
from .models.types import Result
from .utils.helpers import qtip_id


class AnimeClient:
    """Thin forwarders over the shared request executor.

    Only the home aggregate is cached; everything else goes to the network on
    every call.
    """

    def __init__(self, settings: Optional[AppSettings] = None, storage: Optional[Storage] = None, clock=None):
        self.settings = settings or default_settings
        if storage is None:
            storage = FileStorage(self.settings.cache.storage_file)
        cache_kw = {"clock": clock} if clock is not None else {}
        self.cache = HomeCache(
            storage,
            version=self.settings.cache.version,
            ttl=self.settings.cache.duration_hours * 3600,
            **cache_kw,
        )
        self.home = HomeAggregate(lambda: self._get("home"), self.cache)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        api = self.settings.api
        return get_json(api.base_url, path, params, timeout=api.timeout, headers={"User-Agent": api.user_agent})

    def _call(self, path: str, context: str, **params) -> Result:
        return execute(lambda: self._get(path, params or None), context)

    def get_home_info(self) -> Result:
        return self.home.get_home_aggregate()

    def fetch_anime_info(self, id: Optional[str] = None, is_random: bool = False) -> Result:
        if is_random:
            random_id = self._call("random/id", "Failed to fetch a random anime id")
            return self._call("info", f"Failed to fetch anime info for random id: {random_id}", id=random_id)
        if not id:
            raise ValueError("id is required unless is_random is set")
        return self._call("info", f"Failed to fetch anime info for id: {id}", id=id)

    def get_episodes(self, id: str) -> Result:
        return self._call(f"episodes/{id}", f"Failed to fetch episodes for id: {id}")

    def get_servers(self, id: str, episode_id: str) -> Result:
        return self._call(f"servers/{id}", f"Failed to fetch servers for episode: {episode_id}", ep=episode_id)

    def get_stream_info(self, id: str, episode_id: str, server: str, type: str) -> Result:
        return self._call(
            "stream",
            f"Failed to fetch stream info for episode: {episode_id}",
            id=id, ep=episode_id, server=server, type=type,
        )

    def get_qtip(self, id: str) -> Result:
        return self._call(f"qtip/{qtip_id(id)}", f"Failed to fetch qtip for id: {id}")

    def get_search_suggestion(self, keyword: str) -> Result:
        return self._call("search/suggest", "Failed to fetch search suggestions", keyword=keyword)

    def get_schedule(self, date: str) -> Result:
        return self._call("schedule", f"Failed to fetch schedule for date: {date}", date=date)

    def get_next_episode_schedule(self, id: str) -> Result:
        return self._call(f"schedule/{id}", f"Failed to fetch next episode schedule for id: {id}")

    def fetch_voice_actor_info(self, id: str, page: int = 1) -> Result:
        return self._call(f"character/list/{id}", f"Failed to fetch voice actors for id: {id}", page=page)

    def get_category_info(self, path: str, page: int = 1) -> Result:
        return self._call(path, f"Failed to fetch category: {path}", page=page)

    def get_search(self, keyword: str, page: int = 1) -> Result:
        return self._call("search", f"Failed to fetch search results for: {keyword}", keyword=keyword, page=page)


_client: Optional[AnimeClient] = None


def get_client() -> AnimeClient:
    """Process-wide client; one home coordinator per process."""
    global _client
    if _client is None:
        _client = AnimeClient()
    return _client


def set_client(client: Optional[AnimeClient]) -> None:
    global _client
    _client = client
