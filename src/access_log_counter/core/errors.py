"""Exceptions raised by the parser, loader and zone resolver."""

from __future__ import annotations

from pathlib import Path


class FormatError(ValueError):
    """A single line does not follow the access-log field layout."""


class LogParseError(ValueError):
    """A log stream could not be parsed; carries the failing line index."""

    def __init__(self, line_index: int, cause: Exception, path: str | Path | None = None) -> None:
        self.line_index = line_index
        self.cause = cause
        self.path = Path(path) if path is not None else None
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"error parsing line {self.line_index}: {self.cause}"
        if self.path is not None:
            msg = f"{self.path}: {msg}"
        return msg

    def with_path(self, path: str | Path) -> LogParseError:
        """Return a copy of this error that names the file it came from."""
        err = LogParseError(self.line_index, self.cause, path)
        err.__cause__ = self.cause
        return err


class ZoneResolutionError(ValueError):
    """A timezone name could not be resolved."""
