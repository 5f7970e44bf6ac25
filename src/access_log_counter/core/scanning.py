"""Access log discovery in a directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ACCESS_PREFIX = "access"


@dataclass(slots=True)
class LogFiles:
    """Access logs found in a directory, split by compression."""

    files: int = 0  # directory entries examined
    plain: list[Path] = field(default_factory=list)
    zipped: list[Path] = field(default_factory=list)


def classify(name: str) -> str | None:
    """Return 'plain', 'gzip' or None for a file name.

    access.log and rotated access.log.1 are plain, access.log.2.gz is gzip.
    """
    if not name.startswith(ACCESS_PREFIX):
        return None
    ext = name.lower().split(".")
    if len(ext) < 2:
        return None
    if ext[-1] == "log" or ext[-2] == "log":
        return "plain"
    if ext[-1] == "gz":
        return "gzip"
    return None


def find_access_logs(directory: str | Path) -> LogFiles:
    """List the access logs directly inside `directory` (not recursive)."""
    path = Path(directory)
    if not path.exists():
        raise FileNotFoundError(f"Log directory not found: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    logs = LogFiles()
    for entry in sorted(path.iterdir(), key=lambda p: p.name):
        logs.files += 1
        if not entry.is_file():
            continue
        kind = classify(entry.name)
        if kind == "plain":
            logs.plain.append(entry)
        elif kind == "gzip":
            logs.zipped.append(entry)
    return logs
