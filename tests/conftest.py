from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

from access_log_counter.core.formats import AccessLogParser
from access_log_counter.core.models import Record

ACCESS_LINES = [
    '41.227.38.172 - - [14/Nov/2013:06:59:03 +0000] "-" 400 0 "-" "-"',
    '66.249.73.135 - - [14/Nov/2013:07:12:44 +0000] "GET /blog/ HTTP/1.1" 200 5123 "-" '
    '"Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"',
    '93.184.216.34 - - [15/Nov/2013:01:30:00 -0800] "GET /blog/ HTTP/1.1" 200 5123 '
    '"https://example.com/" "Mozilla/5.0 (X11; Linux x86_64)"',
    '10.0.0.7 - alice [17/Nov/2013:23:59:59 +0000] "GET /about HTTP/1.1" 304 0 "-" "curl/7.30.0"',
    '10.0.0.8 - - [17/Nov/2013:08:00:00 +0000] "GET /blog/ HTTP/1.0" 200 10 "-" "curl/7.30.0"',
]


@pytest.fixture
def access_lines() -> list[str]:
    return list(ACCESS_LINES)


@pytest.fixture
def records(access_lines: list[str]) -> list[Record]:
    parser = AccessLogParser()
    return [parser.parse_line(line) for line in access_lines]


@pytest.fixture
def write_access_log() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        data = ("\n".join(lines) + "\n").encode("utf-8")
        if path.suffix == ".gz":
            path.write_bytes(gzip.compress(data))
        else:
            path.write_bytes(data)

    return _write
