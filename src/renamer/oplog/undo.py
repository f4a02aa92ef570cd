"""Undo engine: replay an operation log backwards to restore earlier names.

Entries are replayed last-committed-first so chained renames (a -> b, b -> c)
unwind correctly. An entry is only acted on when its new path exists and its
old path is free; otherwise it is skipped and counted separately, never forced.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from renamer.oplog.log import LogEntry, read_entries
from renamer.utils import StatePreconditionError, logger
from renamer.utils.logger import LogLevel


@dataclass
class UndoResult:
    """Tally of one undo run."""
    undone: int = 0
    errors: int = 0
    skipped: int = 0

    def summary(self) -> str:
        lines = [
            "Undo Result:",
            f"  - Undone: {self.undone}",
            f"  - Skipped: {self.skipped}",
            f"  - Errors: {self.errors}",
        ]
        return "\n".join(lines)


def check_undo_state(entry: LogEntry) -> None:
    """Raise StatePreconditionError unless `entry.new_path` exists and `entry.old_path` does not."""
    new_path = Path(entry.new_path)
    old_path = Path(entry.old_path)
    if not new_path.is_file():
        raise StatePreconditionError(f"renamed file is missing: {new_path}")
    if old_path.exists():
        raise StatePreconditionError(f"original path is occupied: {old_path}")


def undo_entries(entries: list[LogEntry], dry_run: bool = False) -> UndoResult:
    """
    Reverse each entry in the order given.

    Callers wanting a real undo pass the entries newest first; `undo` does that.
    """
    result = UndoResult()
    for entry in entries:
        try:
            check_undo_state(entry)
        except StatePreconditionError as e:
            logger.log("undo.skip", LogLevel.DEBUG, old=entry.old_path, new=entry.new_path, reason=str(e))
            result.skipped += 1
            continue

        if dry_run:
            logger.log("undo.rename", LogLevel.INFO, dry_run=True, old=entry.new_path, new=entry.old_path)
            result.undone += 1
            continue

        try:
            os.rename(entry.new_path, entry.old_path)
        except OSError as e:
            logger.log("undo.error", LogLevel.WARN, old=entry.new_path, new=entry.old_path, error=str(e))
            result.errors += 1
            continue

        logger.log("undo.rename", LogLevel.INFO, old=entry.new_path, new=entry.old_path)
        result.undone += 1
    return result


def undo(log_path: Path, dry_run: bool = False) -> UndoResult:
    """
    Undo every rename recorded in the log at `log_path`.

    Raises:
        NotFoundError: the log file does not exist.
    """
    logger.log("undo.start", LogLevel.INFO, log=str(log_path))
    entries = read_entries(log_path)
    if not entries:
        logger.log("undo.empty", LogLevel.WARN, log=str(log_path), msg="No rename operations found in log file")
        return UndoResult()

    logger.log("undo.found", LogLevel.INFO, operations=len(entries))
    result = undo_entries(list(reversed(entries)), dry_run=dry_run)

    level = LogLevel.WARN if result.errors else LogLevel.INFO
    logger.log("undo.end", level, undone=result.undone, skipped=result.skipped, errors=result.errors)
    return result
