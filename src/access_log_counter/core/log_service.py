"""Log loading and stream parsing.

This module is the integration point that reads access-log files (plain or
gzip) and turns them into Records.
"""

from __future__ import annotations

import asyncio
import gzip
import io
import logging
import os
from collections.abc import Iterable, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from typing import BinaryIO

import aiofiles
from aiofiles.threadpool import wrap

from .errors import FormatError, LogParseError
from .formats import AccessLogParser, RecordParser
from .models import Record
from .scanning import LogFiles, find_access_logs

logger = logging.getLogger(__name__)

MAX_WORKERS_ENV = "ACCESS_LOG_COUNTER_MAX_WORKERS"


def default_parser() -> RecordParser:
    """Default parser for the nginx combined format."""
    return AccessLogParser()


def parse_lines(lines: Iterable[str], *, parser: RecordParser | None = None) -> list[Record]:
    """Parse lines in order, aborting on the first malformed one.

    Blank lines are skipped. The error reports the 0-based index of the
    failing line within `lines`.
    """
    parser = parser or default_parser()
    records: list[Record] = []
    for index, line in enumerate(lines):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            records.append(parser.parse_line(line))
        except FormatError as exc:
            raise LogParseError(index, exc) from exc
    return records


def parse_stream(
    stream: BinaryIO,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
    parser: RecordParser | None = None,
) -> list[Record]:
    """Parse a binary stream (plain, or already gunzipped) of log lines."""
    text = io.TextIOWrapper(stream, encoding=encoding, errors=decode_errors, newline="")
    try:
        return parse_lines(text, parser=parser)
    finally:
        text.detach()


@asynccontextmanager
async def open_log(path: Path, *, encoding: str = "utf-8", decode_errors: str = "replace"):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


async def read_records(
    log_path: str | Path,
    *,
    parser: RecordParser | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> list[Record]:
    """Read and parse one log file. Parse errors name the file."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    async with open_log(path, encoding=encoding, decode_errors=decode_errors) as f:
        lines = [line async for line in f]

    try:
        records = parse_lines(lines, parser=parser)
    except LogParseError as exc:
        raise exc.with_path(path) from exc.cause
    logger.debug("Parsed %d records from %s", len(records), path)
    return records


def _resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv(MAX_WORKERS_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
        return value

    cpu_count = os.cpu_count() or 1
    return min(32, cpu_count)


async def load_records(
    paths: Sequence[str | Path],
    *,
    parser: RecordParser | None = None,
    max_workers: int | None = None,
    encoding: str = "utf-8",
) -> list[Record]:
    """Parse several files and concatenate their records in the order of `paths`."""
    semaphore = asyncio.Semaphore(_resolve_max_workers(max_workers))

    async def one(path: str | Path) -> list[Record]:
        async with semaphore:
            return await read_records(path, parser=parser, encoding=encoding)

    results = await asyncio.gather(*(one(p) for p in paths), return_exceptions=True)

    records: list[Record] = []
    # Report the first failing file in path order, not completion order.
    for chunk in results:
        if isinstance(chunk, BaseException):
            raise chunk
        records.extend(chunk)
    return records


async def load_directory(
    directory: str | Path,
    *,
    parser: RecordParser | None = None,
    max_workers: int | None = None,
) -> tuple[LogFiles, list[Record]]:
    """Find the access logs in `directory` and parse them, plain files first."""
    logs = find_access_logs(directory)
    logger.info(
        "Found %d plain and %d gzipped access logs in %s",
        len(logs.plain),
        len(logs.zipped),
        directory,
    )
    records = await load_records(
        [*logs.plain, *logs.zipped],
        parser=parser,
        max_workers=max_workers,
    )
    return logs, records
