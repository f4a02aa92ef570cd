"""Append-only operation log of committed renames.

Each committed rename becomes one UTF-8 line:

    2026-10-17 14:03:11 RENAME: '/photos/IMG_1.jpg' → '/photos/trip_1.jpg'

Lines are written and flushed one at a time at commit, so after an interruption
the file lists exactly the renames that happened. The same file may also hold
ordinary diagnostic lines; the parser ignores anything that is not a record.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from renamer.utils import NotFoundError, logger, time_util
from renamer.utils.logger import LogLevel

RECORD_MARKER = " RENAME: "
ARROW = "→"
_PATH_SEPARATOR = f"' {ARROW} '"


@dataclass(frozen=True)
class LogEntry:
    """One committed rename."""
    timestamp: str
    old_path: str
    new_path: str

    def to_line(self) -> str:
        return f"{self.timestamp}{RECORD_MARKER}'{self.old_path}' {ARROW} '{self.new_path}'"

    @classmethod
    def from_line(cls, line: str) -> LogEntry | None:
        """Parse one log line; returns None for anything that is not a rename record."""
        line = line.rstrip("\r\n")
        timestamp, marker, rest = line.partition(RECORD_MARKER)
        if not marker:
            return None
        if len(rest) < 2 or not (rest.startswith("'") and rest.endswith("'")):
            return None
        old_path, separator, new_path = rest[1:-1].partition(_PATH_SEPARATOR)
        if not separator or not old_path or not new_path:
            return None
        return cls(timestamp=timestamp.strip(), old_path=old_path, new_path=new_path)


class OperationLog:
    """Writer for the operation log.

    Usage::

        oplog = OperationLog(Path("renames.log"))
        oplog.record(old_path, new_path)
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def record(self, old_path: Path, new_path: Path, now: datetime | None = None) -> LogEntry:
        """Append one entry and flush it before returning."""
        entry = LogEntry(
            timestamp=time_util.log_timestamp(now),
            old_path=str(old_path),
            new_path=str(new_path),
        )
        with open(self.path, "a", encoding="utf-8") as fh:
            fh.write(entry.to_line() + "\n")
            fh.flush()
        logger.log("oplog.record", LogLevel.DEBUG, log=str(self.path), old=entry.old_path, new=entry.new_path)
        return entry


def parse_lines(lines) -> list[LogEntry]:
    """Rename records from `lines`, in file (commit) order."""
    entries = []
    for line in lines:
        entry = LogEntry.from_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def read_entries(path: Path) -> list[LogEntry]:
    """Read every rename record from the log at `path`, in commit order."""
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"Log file not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        return parse_lines(fh)
