"""MCP server exposing the page loader as a tool."""

from __future__ import annotations

import logging

from anyio import to_thread
from mcp.server.fastmcp import FastMCP

from .loader import load_page as _load_page

logger = logging.getLogger("page_loader.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="page-loader")


@mcp.tool()
async def load_page(url: str, output_dir: str) -> str:
    """Save a web page and its same-origin assets into an existing directory.

    Returns the path of the saved HTML file.
    """
    page_path = await to_thread.run_sync(_load_page, url, output_dir)
    return str(page_path)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
