"""MCP tools for sankanime."""

from . import home
from . import anime
from . import browse
from . import cache_tools
from . import meta

__all__ = [
    "home",
    "anime",
    "browse",
    "cache_tools",
    "meta",
]
