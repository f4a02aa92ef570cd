"""
Operation log and undo.

- log: LogEntry records, the append-only OperationLog writer and the line parser.
- undo: Reverse replay of a log with per-entry filesystem state checks.

Example:
    from pathlib import Path
    from renamer import oplog
    result = oplog.undo(Path("renames.log"))
    print(result.undone, result.errors)
"""
from .log import (
    LogEntry,
    OperationLog,
    parse_lines,
    read_entries,
)
from .undo import (
    UndoResult,
    check_undo_state,
    undo,
    undo_entries,
)

__all__ = [
    "LogEntry",
    "OperationLog",
    "parse_lines",
    "read_entries",
    "UndoResult",
    "check_undo_state",
    "undo",
    "undo_entries",
]
