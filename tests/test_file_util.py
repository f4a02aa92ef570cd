"""Tests for directory scanning and the single rename commit point."""

import pytest

from renamer.utils import (
    STATUS_DECLINED,
    STATUS_DRY_RUN,
    STATUS_OK,
    STATUS_UNCHANGED,
    CollisionError,
    NotFoundError,
)
from renamer.utils.file_util import commit_rename, insert_before_extension, scan_files, split_extension


class RecordingLog:
    def __init__(self):
        self.records = []

    def record(self, old_path, new_path):
        self.records.append((old_path, new_path))


@pytest.fixture
def oplog():
    return RecordingLog()


# ---------- commit_rename ----------

def test_rename_moves_file_and_records(make_file, oplog):
    source = make_file("a.txt", "A")
    target = source.with_name("b.txt")
    assert commit_rename(source, target, oplog=oplog) == STATUS_OK
    assert not source.exists()
    assert target.read_text(encoding="utf-8") == "A"
    assert oplog.records == [(source, target)]


def test_same_name_is_a_noop(make_file, oplog):
    source = make_file("a.txt")
    assert commit_rename(source, source, oplog=oplog) == STATUS_UNCHANGED
    assert source.exists()
    assert oplog.records == []


def test_collision_leaves_both_files_untouched(make_file, oplog):
    source = make_file("a.txt", "source")
    target = make_file("b.txt", "target")
    with pytest.raises(CollisionError):
        commit_rename(source, target, oplog=oplog)
    assert source.read_text(encoding="utf-8") == "source"
    assert target.read_text(encoding="utf-8") == "target"
    assert oplog.records == []


def test_missing_source(tmp_path):
    with pytest.raises(NotFoundError):
        commit_rename(tmp_path / "nope.txt", tmp_path / "b.txt")


def test_dry_run_touches_nothing(make_file, oplog):
    source = make_file("a.txt")
    target = source.with_name("b.txt")
    assert commit_rename(source, target, dry_run=True, oplog=oplog) == STATUS_DRY_RUN
    assert source.exists()
    assert not target.exists()
    assert oplog.records == []


def test_dry_run_still_reports_collision(make_file):
    source = make_file("a.txt")
    target = make_file("b.txt")
    with pytest.raises(CollisionError):
        commit_rename(source, target, dry_run=True)


def test_backup_copy_created(make_file):
    source = make_file("a.txt", "keep me")
    target = source.with_name("b.txt")
    commit_rename(source, target, backup=True)
    backup = source.with_name("a.txt.bak")
    assert backup.read_text(encoding="utf-8") == "keep me"
    assert target.read_text(encoding="utf-8") == "keep me"


def test_declined_confirmation(make_file, oplog):
    source = make_file("a.txt")
    target = source.with_name("b.txt")
    asked = []

    def confirm(src, dst):
        asked.append((src, dst))
        return False

    assert commit_rename(source, target, confirm=confirm, oplog=oplog) == STATUS_DECLINED
    assert asked == [(source, target)]
    assert source.exists()
    assert oplog.records == []


# ---------- scanning ----------

def test_scan_matches_pattern_and_sorts(make_file, tmp_path):
    make_file("b.txt")
    make_file("a.txt")
    make_file("c.jpg")
    (tmp_path / "dir.txt").mkdir()
    assert scan_files(tmp_path, "*.txt") == [tmp_path / "a.txt", tmp_path / "b.txt"]


def test_scan_recursive(make_file, tmp_path):
    make_file("top.txt")
    make_file("sub/deep.txt")
    assert scan_files(tmp_path, "*.txt") == [tmp_path / "top.txt"]
    assert set(scan_files(tmp_path, "*.txt", recursive=True)) == {tmp_path / "top.txt", tmp_path / "sub" / "deep.txt"}


def test_scan_missing_directory(tmp_path):
    with pytest.raises(NotFoundError):
        scan_files(tmp_path / "missing")


# ---------- extension helpers ----------

def test_split_extension():
    assert split_extension("a.b.txt") == ("a.b", "txt")
    assert split_extension("README") == ("README", "")


def test_insert_before_extension():
    assert insert_before_extension("a.txt", "_1") == "a_1.txt"
    assert insert_before_extension("README", "_1") == "README_1"
