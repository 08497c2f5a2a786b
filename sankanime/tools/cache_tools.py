"""Cache management tools for sankanime."""

from ..client import get_client
from ..core.errors import SCHEMA


def cache_info():
    """Home cache statistics."""
    info = get_client().cache.info()
    info["schemaVersion"] = SCHEMA
    return info


def cache_clear():
    """Drop the home cache record (and records from older cache versions)."""
    cleared = get_client().cache.clear()
    return {"schemaVersion": SCHEMA, "cleared": cleared}


def register_tools(mcp):
    """Register cache-related tools with FastMCP."""
    mcp.tool()(cache_info)
    mcp.tool()(cache_clear)
