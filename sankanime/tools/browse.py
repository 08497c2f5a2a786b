"""Search, category and schedule tools for sankanime."""

from ..client import get_client
from ..core.errors import SCHEMA, payload_for

SOURCE = "sankanime"


def search(keyword: str, page: int = 1):
    """Search titles by keyword."""
    try:
        page = max(page, 1)
        return {"schemaVersion": SCHEMA, "query": keyword, "page": page,
                "results": get_client().get_search(keyword, page)}
    except Exception as e:
        return payload_for(SOURCE, e)


def search_suggestion(keyword: str):
    """Type-ahead suggestions for a partial keyword."""
    try:
        return {"schemaVersion": SCHEMA, "query": keyword, "results": get_client().get_search_suggestion(keyword)}
    except Exception as e:
        return payload_for(SOURCE, e)


def category(path: str, page: int = 1):
    """
    Listing for a category path, e.g. 'most-popular', 'top-airing', 'genre/action'.
    """
    try:
        page = max(page, 1)
        return {"schemaVersion": SCHEMA, "category": path, "page": page,
                "results": get_client().get_category_info(path.strip("/"), page)}
    except Exception as e:
        return payload_for(SOURCE, e)


def schedule(date: str):
    """Airing schedule for a date (YYYY-MM-DD)."""
    try:
        return {"schemaVersion": SCHEMA, "date": date, "results": get_client().get_schedule(date)}
    except Exception as e:
        return payload_for(SOURCE, e)


def next_episode_schedule(id: str):
    try:
        return {"schemaVersion": SCHEMA, "id": id, "results": get_client().get_next_episode_schedule(id)}
    except Exception as e:
        return payload_for(SOURCE, e)


def register_tools(mcp):
    """Register browse tools with FastMCP."""
    mcp.tool()(search)
    mcp.tool()(search_suggestion)
    mcp.tool()(category)
    mcp.tool()(schedule)
    mcp.tool()(next_episode_schedule)
