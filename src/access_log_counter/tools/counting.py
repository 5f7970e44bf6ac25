"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from access_log_counter.core.counting import count, count_by_day
from access_log_counter.core.log_service import load_directory
from access_log_counter.core.timezones import resolve_zone

BASE_DIR_ENV = "ACCESS_LOG_COUNTER_BASE_DIR"


class DayCount(BaseModel):
    date: str = Field(description="Calendar day, YYYY-MM-DD, in the requested timezone.")
    count: int = Field(ge=0, description="Matching records on that day.")


class ViewCountResult(BaseModel):
    url: str = Field(description="URL that was counted (exact match).")
    files: int = Field(ge=0, description="Directory entries examined.")
    plain_logs: int = Field(ge=0, description="Plain-text access logs parsed.")
    gzip_logs: int = Field(ge=0, description="Gzipped access logs parsed.")
    records: int = Field(ge=0, description="Total records parsed.")
    total: int = Field(ge=0, description="Records whose URL matched.")
    days: list[DayCount] | None = Field(
        default=None,
        description="Gap-filled per-day counts, oldest first (only when by_date).",
    )


def _base_dir() -> Path:
    """Return the resolved base directory for relative log paths."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


async def count_url_views_impl(
    *,
    log_dir: str,
    url: str,
    by_date: bool = False,
    tz: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `count_url_views` MCP tool."""
    if not url:
        raise ValueError("url must not be empty")
    zone = resolve_zone(tz)
    directory = _safe_resolve(log_dir)

    logs, records = await load_directory(directory)

    days: list[DayCount] | None = None
    if by_date:
        total, series = count_by_day(records, url, zone)
        days = [DayCount(date=c.date.isoformat(), count=c.count) for c in series]
    else:
        total = count(records, url)

    result = ViewCountResult(
        url=url,
        files=logs.files,
        plain_logs=len(logs.plain),
        gzip_logs=len(logs.zipped),
        records=len(records),
        total=total,
        days=days,
    )
    return result.model_dump(exclude_none=True)
