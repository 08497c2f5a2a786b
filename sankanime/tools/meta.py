"""Metadata tools for sankanime."""

from importlib.metadata import version, PackageNotFoundError

from ..config import settings
from ..core.errors import SCHEMA

try:
    __VERSION__ = version("sankanime-client")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health():
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["sankanime"]}


def about():
    """About information for the service."""
    return {
        "schemaVersion": SCHEMA,
        "name": "sankanime",
        "version": __VERSION__,
        "endpoints": {"sankanime": settings.api.base_url},
        "limits": {"timeoutSec": settings.api.timeout, "homeCacheHours": settings.cache.duration_hours},
    }


def register_tools(mcp):
    """Register meta tools with FastMCP."""
    mcp.tool()(health)
    mcp.tool()(about)
