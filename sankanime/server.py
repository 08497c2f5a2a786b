# SPDX-License-Identifier: MIT
"""
sankanime MCP server entrypoint.

Wires FastMCP with all tool modules under sankanime/tools/.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .config import settings
from .log import configure_logging
from .tools import home, anime, browse, cache_tools, meta


def create_app() -> FastMCP:
    configure_logging(settings.log_level)
    mcp = FastMCP("sankanime")

    home.register_tools(mcp)
    anime.register_tools(mcp)
    browse.register_tools(mcp)
    cache_tools.register_tools(mcp)
    meta.register_tools(mcp)

    return mcp


def main() -> None:
    create_app().run()


if __name__ == "__main__":
    main()
