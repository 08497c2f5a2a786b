"""Home aggregate tool for sankanime."""

from ..client import get_client
from ..core.errors import SCHEMA, payload_for


def home_info():
    """Spotlight, trending, latest and top lists from the home page (cached 24 h)."""
    try:
        return {"schemaVersion": SCHEMA, "results": get_client().get_home_info()}
    except Exception as e:
        return payload_for("sankanime", e)


def register_tools(mcp):
    mcp.tool()(home_info)
