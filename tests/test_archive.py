"""Tests for zipping collections."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from azkabantool.core import archive, remove_archive, render_collection
from azkabantool.errors import DirectoryNotFound


def test_archive_contains_full_tree(workdir: Path) -> None:
    render_collection("daily_reporting")

    archive_path = archive("daily_reporting")

    assert archive_path == Path("daily_reporting.zip")
    with zipfile.ZipFile(archive_path) as zf:
        names = set(zf.namelist())
    assert "daily_reporting/controller.job" in names
    assert "daily_reporting/final_daily_reporting_job/final_daily_reporting_job.job" in names


def test_archive_twice_overwrites(workdir: Path) -> None:
    collection = render_collection("daily_reporting")
    first = archive(collection)
    (collection / "global.properties").unlink()
    (collection / "extra.job").write_text("type=command\ncommand=true\n")

    second = archive(collection)

    assert first == second
    assert sorted(p.name for p in workdir.glob("*.zip")) == ["daily_reporting.zip"]
    with zipfile.ZipFile(second) as zf:
        names = set(zf.namelist())
    assert "daily_reporting/extra.job" in names
    assert "daily_reporting/global.properties" not in names


def test_archive_missing_directory(workdir: Path) -> None:
    with pytest.raises(DirectoryNotFound) as exc:
        archive("nope")
    assert "nope" in str(exc.value)


def test_remove_archive(workdir: Path) -> None:
    render_collection("daily_reporting")
    archive_path = archive("daily_reporting")

    remove_archive(archive_path)
    assert not archive_path.exists()
    # removing again is a no-op
    remove_archive(archive_path)
