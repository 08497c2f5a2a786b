"""Per-title tools for sankanime: info, episodes, servers, streams."""

from typing import Optional

from ..client import get_client
from ..core.errors import SCHEMA, payload_for

SOURCE = "sankanime"


def anime_info(id: Optional[str] = None, random: bool = False):
    """Full info for an anime id. random=True picks a random title instead."""
    try:
        return {"schemaVersion": SCHEMA, "results": get_client().fetch_anime_info(id, is_random=random)}
    except Exception as e:
        return payload_for(SOURCE, e)


def episodes(id: str):
    """Episode list for an anime id."""
    try:
        return {"schemaVersion": SCHEMA, "id": id, "results": get_client().get_episodes(id)}
    except Exception as e:
        return payload_for(SOURCE, e)


def servers(id: str, episode_id: str):
    """Streaming servers available for one episode."""
    try:
        return {"schemaVersion": SCHEMA, "id": id, "episode": episode_id,
                "results": get_client().get_servers(id, episode_id)}
    except Exception as e:
        return payload_for(SOURCE, e)


def stream_info(id: str, episode_id: str, server: str, type: str = "sub"):
    """
    Stream sources for an episode on a server.
    type: 'sub' or 'dub'.
    """
    try:
        data = get_client().get_stream_info(id, episode_id, server, type)
        return {"schemaVersion": SCHEMA, "episode": episode_id, "server": server, "type": type, "results": data}
    except Exception as e:
        return payload_for(SOURCE, e)


def qtip(id: str):
    """Short hover card for an anime id."""
    try:
        return {"schemaVersion": SCHEMA, "id": id, "results": get_client().get_qtip(id)}
    except Exception as e:
        return payload_for(SOURCE, e)


def voice_actors(id: str, page: int = 1):
    try:
        page = max(page, 1)
        return {"schemaVersion": SCHEMA, "id": id, "page": page,
                "results": get_client().fetch_voice_actor_info(id, page)}
    except Exception as e:
        return payload_for(SOURCE, e)


def register_tools(mcp):
    """Register per-title tools with FastMCP."""
    mcp.tool()(anime_info)
    mcp.tool()(episodes)
    mcp.tool()(servers)
    mcp.tool()(stream_info)
    mcp.tool()(qtip)
    mcp.tool()(voice_actors)
