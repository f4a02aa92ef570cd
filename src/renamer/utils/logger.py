"""
Provides structured logging with log levels and an optional file sink.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. Console lines
go through tqdm so they do not break an active progress bar.
"""
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, Any

from tqdm import tqdm

_separator = " | "
_log_file: Path | None = None


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def level_from_name(name: str, default: LogLevel = LogLevel.INFO) -> LogLevel:
    """Resolve a level name such as 'debug' or 'WARN'; unknown names give `default`."""
    try:
        return LogLevel[name.strip().upper()]
    except KeyError:
        return default


def set_log_file(path: Path | None) -> None:
    """Also append diagnostics at INFO and above to `path` (None disables the sink)."""
    global _log_file
    _log_file = Path(path) if path else None
    if _log_file is not None:
        _log_file.parent.mkdir(parents=True, exist_ok=True)


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str) -> None:
    tqdm.write(text)


def _append_to_file(level: LogLevel, event: str, kv_str: str) -> None:
    # Same timestamp layout as the operation records so the file reads as one history.
    if _log_file is None or level.value < LogLevel.INFO.value:
        return
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"{timestamp} {level.name}: {event}"
    if kv_str:
        line = f"{line}{_separator}{kv_str}"
    with open(_log_file, "a", encoding="utf-8") as fh:
        fh.write(line + "\n")


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'transform.stage', 'undo.skip')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    kv_str = _format_kv(kwargs) if kwargs else ""
    _append_to_file(level, event, kv_str)

    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"

    if kv_str:
        _write_line(f"{header}{_separator}{kv_str}")
    else:
        _write_line(header)


def safe_print(*args, **kwargs) -> None:
    """
    Plain console print for user-facing output.
    Use log() for structured logging instead.
    """
    print(*args, **kwargs, flush=True)
