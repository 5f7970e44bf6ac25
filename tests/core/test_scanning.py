from __future__ import annotations

from pathlib import Path

import pytest

from access_log_counter.core.scanning import classify, find_access_logs


@pytest.mark.parametrize(
    ("name", "kind"),
    [
        ("access.log", "plain"),
        ("access.LOG", "plain"),
        ("access.log.1", "plain"),
        ("access-site.log", "plain"),
        ("access.log.2.gz", "gzip"),
        ("access.gz", "gzip"),
        ("access", None),
        ("access.txt", None),
        ("error.log", None),
        ("Access.log", None),
    ],
)
def test_classify(name: str, kind: str | None) -> None:
    assert classify(name) == kind


def test_find_access_logs(tmp_path: Path) -> None:
    for name in ["access.log", "access.log.1", "access.log.3.gz", "access.log.2.gz", "error.log"]:
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "access.log.d").mkdir()

    logs = find_access_logs(tmp_path)

    assert logs.files == 6
    assert [p.name for p in logs.plain] == ["access.log", "access.log.1"]
    assert [p.name for p in logs.zipped] == ["access.log.2.gz", "access.log.3.gz"]


def test_find_access_logs_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        find_access_logs(tmp_path / "nope")


def test_find_access_logs_not_a_directory(tmp_path: Path) -> None:
    path = tmp_path / "access.log"
    path.write_text("", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        find_access_logs(path)
