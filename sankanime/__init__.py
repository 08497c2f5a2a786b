"""sankanime package.

Exports the catalog client and the FastMCP app factory `create_app`.
"""
from .client import AnimeClient, get_client
from .server import create_app

__all__ = ["AnimeClient", "get_client", "create_app"]
