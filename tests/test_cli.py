from __future__ import annotations

from pathlib import Path

import pytest

from access_log_counter.cli import main


def test_total_views(tmp_path: Path, access_lines: list[str], write_access_log, capsys) -> None:
    write_access_log(tmp_path / "access.log", access_lines)

    main(["/blog/", "-i", str(tmp_path)])

    out = capsys.readouterr().out
    assert out == "\n3 Total Views\n\n"


def test_views_by_date(tmp_path: Path, access_lines: list[str], write_access_log, capsys) -> None:
    write_access_log(tmp_path / "access.log", access_lines[:3])
    write_access_log(tmp_path / "access.log.1.gz", access_lines[3:])

    main(["/blog/", "-i", str(tmp_path), "--date"])

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "",
        "3 Total Views",
        "",
        "November 14, 2013: 1",
        "November 15, 2013: 1",
        "November 16, 2013: 0",
        "November 17, 2013: 1",
    ]


def test_views_by_date_in_zone(tmp_path: Path, access_lines: list[str], write_access_log, capsys) -> None:
    write_access_log(tmp_path / "access.log", access_lines)

    main(["/blog/", "-i", str(tmp_path), "--date", "--tz", "America/Los_Angeles"])

    out = capsys.readouterr().out
    assert "November 13, 2013: 1" in out
    assert "November 17, 2013: 1" in out


def test_missing_url_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_bad_timezone_exits(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["/blog/", "-i", str(tmp_path), "--tz", "Nowhere/Land"])
    assert exc_info.value.code == 2
    assert "timezone" in capsys.readouterr().err


def test_missing_directory_exits(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["/blog/", "-i", str(tmp_path / "nope")])
    assert exc_info.value.code == 2
    assert "Error while reading directory" in capsys.readouterr().err


def test_parse_error_exits(tmp_path: Path, capsys) -> None:
    (tmp_path / "access.log").write_text("garbage\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["/blog/", "-i", str(tmp_path)])
    assert exc_info.value.code == 2
    assert "error parsing line 0" in capsys.readouterr().err
