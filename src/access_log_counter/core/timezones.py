"""Timezone name resolution for per-day counting."""

from __future__ import annotations

from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ZoneResolutionError

_UTC_NAMES = {"", "UTC", "Z"}


def resolve_zone(name: str | None) -> tzinfo:
    """Resolve an IANA zone name (e.g. America/Los_Angeles). Empty/None means UTC."""
    if name is None or name.strip().upper() in _UTC_NAMES:
        return UTC
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ZoneResolutionError(f"Unknown timezone '{name}'") from exc
