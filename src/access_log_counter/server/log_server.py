"""MCP server entrypoint (stdio transport).

Exposes URL view counting over access logs as an MCP tool.

Run locally (stdio):
    python -m access_log_counter.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from access_log_counter.cli import configure_logging
from access_log_counter.tools.counting import count_url_views_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("access-log-counter", json_response=True)


@mcp.tool()
async def count_url_views(
    log_dir: str,
    url: str,
    by_date: bool = False,
    tz: str | None = None,
) -> dict[str, Any]:
    """Count how many access-log records requested a URL.

    Parameters
    ----------
    log_dir:
        Directory holding nginx access logs (access*.log, access*.log.N,
        access*.gz). Relative paths resolve under ACCESS_LOG_COUNTER_BASE_DIR.
    url:
        Request URL to count, matched exactly (e.g., /blog/post-1).
    by_date:
        When true, also return one count per calendar day, with days that have
        no views filled in as zero.
    tz:
        IANA timezone used to bucket days (e.g., America/Los_Angeles).
        Defaults to UTC.

    Returns
    -------
    dict:
        {"url", "files", "plain_logs", "gzip_logs", "records", "total", "days"?}
    """
    return await count_url_views_impl(log_dir=log_dir, url=url, by_date=by_date, tz=tz)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
