"""Tests for the operation log format and the undo engine."""

from datetime import datetime

import pytest

from renamer.oplog import (
    LogEntry,
    OperationLog,
    check_undo_state,
    parse_lines,
    read_entries,
    undo,
    undo_entries,
)
from renamer.transform import AddPrefix, RenameRule, rename_directory
from renamer.utils import NotFoundError, StatePreconditionError


def entry(old, new):
    return LogEntry(timestamp="2025-01-01 12:00:00", old_path=str(old), new_path=str(new))


# ---------- log format ----------

def test_line_format():
    line = entry("/p/a.txt", "/p/b.txt").to_line()
    assert line == "2025-01-01 12:00:00 RENAME: '/p/a.txt' → '/p/b.txt'"


def test_line_parses_back():
    original = entry("/p/it's a.txt", "/p/b c.txt")
    assert LogEntry.from_line(original.to_line() + "\n") == original


def test_non_record_lines_ignored():
    lines = [
        "2025-01-01 12:00:00 INFO: startup | tool=\"file-renamer\"\n",
        "\n",
        "garbage\n",
        "2025-01-01 12:00:01 RENAME: '/p/a.txt' → '/p/b.txt'\n",
        "2025-01-01 12:00:02 RENAME: missing quotes\n",
    ]
    assert parse_lines(lines) == [LogEntry("2025-01-01 12:00:01", "/p/a.txt", "/p/b.txt")]


def test_record_appends_in_commit_order(tmp_path):
    log = OperationLog(tmp_path / "logs" / "ops.log")
    now = datetime(2025, 3, 4, 5, 6, 7)
    log.record(tmp_path / "a", tmp_path / "b", now=now)
    log.record(tmp_path / "b", tmp_path / "c", now=now)
    entries = read_entries(tmp_path / "logs" / "ops.log")
    assert [(e.old_path, e.new_path) for e in entries] == [
        (str(tmp_path / "a"), str(tmp_path / "b")),
        (str(tmp_path / "b"), str(tmp_path / "c")),
    ]
    assert entries[0].timestamp == "2025-03-04 05:06:07"


def test_missing_log(tmp_path):
    with pytest.raises(NotFoundError):
        read_entries(tmp_path / "none.log")
    with pytest.raises(NotFoundError):
        undo(tmp_path / "none.log")


# ---------- undo ----------

def test_undo_chain_in_reverse(tmp_path):
    a, b, c = tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "c.txt"
    c.write_text("x", encoding="utf-8")
    log = OperationLog(tmp_path / "ops.log")
    log.record(a, b)
    log.record(b, c)

    result = undo(tmp_path / "ops.log")

    assert (result.undone, result.skipped, result.errors) == (2, 0, 0)
    assert a.exists()
    assert not b.exists()
    assert not c.exists()


def test_forward_replay_cannot_restore_chain(tmp_path):
    a, b, c = tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "c.txt"
    c.write_text("x", encoding="utf-8")

    result = undo_entries([entry(a, b), entry(b, c)])

    assert (result.undone, result.skipped) == (1, 1)
    assert not a.exists()
    assert b.exists()


def test_occupied_original_is_skipped(tmp_path):
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"
    a.write_text("new occupant", encoding="utf-8")
    b.write_text("renamed", encoding="utf-8")

    with pytest.raises(StatePreconditionError):
        check_undo_state(entry(a, b))
    result = undo_entries([entry(a, b)])

    assert result.skipped == 1
    assert a.read_text(encoding="utf-8") == "new occupant"
    assert b.read_text(encoding="utf-8") == "renamed"


def test_missing_renamed_file_is_skipped(tmp_path):
    result = undo_entries([entry(tmp_path / "a.txt", tmp_path / "b.txt")])
    assert (result.undone, result.skipped, result.errors) == (0, 1, 0)


def test_undo_dry_run_moves_nothing(tmp_path):
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"
    b.write_text("x", encoding="utf-8")
    result = undo_entries([entry(a, b)], dry_run=True)
    assert result.undone == 1
    assert b.exists()
    assert not a.exists()


def test_empty_log_undoes_nothing(tmp_path):
    path = tmp_path / "ops.log"
    path.write_text("2025-01-01 12:00:00 INFO: startup\n", encoding="utf-8")
    result = undo(path)
    assert (result.undone, result.skipped, result.errors) == (0, 0, 0)


def test_batch_then_undo_restores_names(tmp_path):
    photos = tmp_path / "photos"
    photos.mkdir()
    for name in ("one.jpg", "two.jpg"):
        (photos / name).write_text(name, encoding="utf-8")
    log_path = tmp_path / "ops.log"

    report = rename_directory(photos, RenameRule(stages=(AddPrefix("trip_"),)), oplog=OperationLog(log_path))
    assert report.ok == 2
    assert sorted(p.name for p in photos.iterdir()) == ["trip_one.jpg", "trip_two.jpg"]

    result = undo(log_path)
    assert result.undone == 2
    assert sorted(p.name for p in photos.iterdir()) == ["one.jpg", "two.jpg"]
    assert (photos / "one.jpg").read_text(encoding="utf-8") == "one.jpg"


def test_summary_lists_counts():
    result = undo_entries([])
    assert "Undone: 0" in result.summary()
