from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from access_log_counter.core.counting import count, count_by_day
from access_log_counter.core.errors import LogParseError, ZoneResolutionError
from access_log_counter.core.log_service import load_directory
from access_log_counter.core.timezones import resolve_zone

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ACCESS_LOG_COUNTER_LOG_LEVEL"


def configure_logging() -> None:
    """Log to stderr so stdout only carries the counts."""
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Count views of a URL in nginx access logs.")
    p.add_argument("url", help="URL to count, matched exactly (e.g. /index.html)")
    p.add_argument("-i", dest="path", default=".", help="Directory to parse (default: current directory)")
    p.add_argument("--date", dest="by_date", action="store_true", help="Count the views by date")
    p.add_argument("--tz", default="", help="Timezone of views, e.g. America/Los_Angeles (default: UTC)")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        tz = resolve_zone(args.tz)
        logs, records = asyncio.run(load_directory(args.path))
    except ZoneResolutionError as e:
        print(f"Error while loading timezone: {e}", file=sys.stderr)
        raise SystemExit(2)
    except (FileNotFoundError, NotADirectoryError) as e:
        print(f"Error while reading directory {args.path}: {e}", file=sys.stderr)
        raise SystemExit(2)
    except (LogParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    LOGGER.info("%d files examined", logs.files)
    LOGGER.info("%d access logs", len(logs.plain))
    LOGGER.info("%d gzipped access logs", len(logs.zipped))
    LOGGER.info("Total records parsed: %d", len(records))

    if args.by_date:
        total, counts = count_by_day(records, args.url, tz)
        print(f"\n{total} Total Views\n")
        for c in counts:
            print(f"{c.date}: {c.count}")
    else:
        total = count(records, args.url)
        print(f"\n{total} Total Views\n")


if __name__ == "__main__":
    main()
