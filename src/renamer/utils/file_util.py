"""
Filename text helpers and the filesystem wrapper used by both renaming tools.

This module holds the name sanitizer, small helpers for splitting names around
their extension, content hashing for generated tokens, directory scanning, and
`commit_rename`, the single place where a rename actually touches the disk.
"""
import hashlib
import os
import re
import shutil
from pathlib import Path
from typing import Callable

from renamer.utils import logger
from renamer.utils.constants import (
    BACKUP_SUFFIX,
    FALLBACK_NAME,
    HASH_TOKEN_LENGTH,
    STATUS_DECLINED,
    STATUS_DRY_RUN,
    STATUS_OK,
    STATUS_UNCHANGED,
)
from renamer.utils.errors import CollisionError, NotFoundError
from renamer.utils.logger import LogLevel

_FULLWIDTH_MAP = str.maketrans({"？": "?", "！": "!", "：": ":"})
_QUOTE_MAP = str.maketrans({"“": '"', "”": '"', "‘": "'", "’": "'"})
_DISALLOWED = re.compile(r"[^A-Za-z0-9 ().-]")
_EDGE_SPACE_DOT = re.compile(r"^[\s.]+|[\s.]+$")
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")


def normalize_text(text: str) -> str:
    """Normalize text by replacing separators with spaces and collapsing whitespace."""
    text = text.replace("_", " ").replace("-", " ")
    return re.sub(r"\s+", " ", text).strip()


def sanitize_filename(name: str) -> str:
    """
    Reduce a name to a cross-platform-safe string.

    Full-width punctuation and smart quotes are mapped to ASCII first, then every
    character outside letters, digits, space, parentheses, dot and hyphen is dropped.
    Edge whitespace and dots are trimmed and runs of spaces or hyphens collapse to one.
    An empty result becomes FALLBACK_NAME. Applying it twice gives the same result.
    """
    name = name.translate(_FULLWIDTH_MAP).translate(_QUOTE_MAP)
    name = _DISALLOWED.sub("", name)
    name = _EDGE_SPACE_DOT.sub("", name)
    name = re.sub(r"\s+", " ", name)
    name = re.sub(r"-+", "-", name)
    name = _CONTROL.sub("", name)
    return name or FALLBACK_NAME


def split_extension(name: str) -> tuple[str, str]:
    """Split at the last dot: ("a.b.txt") -> ("a.b", "txt"); no dot gives ("name", "")."""
    if "." not in name:
        return name, ""
    stem, _, ext = name.rpartition(".")
    return stem, ext


def insert_before_extension(name: str, text: str) -> str:
    """Insert `text` right before the last '.', or append it when there is none."""
    if "." not in name:
        return f"{name}{text}"
    stem, ext = split_extension(name)
    return f"{stem}{text}.{ext}"


def file_hash(path: Path, length: int = HASH_TOKEN_LENGTH) -> str | None:
    """First `length` hex characters of the file's MD5, or None if it cannot be read."""
    path = Path(path)
    if not path.is_file():
        return None
    digest = hashlib.md5()
    try:
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(65536), b""):
                digest.update(chunk)
    except OSError as e:
        logger.log("file.hash.error", LogLevel.WARN, file=str(path), error=str(e))
        return None
    return digest.hexdigest()[:length]


def scan_files(directory: Path, pattern: str = "*", recursive: bool = False) -> list[Path]:
    """
    Snapshot the regular files in `directory` whose names match `pattern`.

    The result is sorted so a batch always walks files in the same order.
    Raises NotFoundError when `directory` is missing or not a directory.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotFoundError(f"Directory does not exist: {root}")
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)
    return sorted(p for p in candidates if p.is_file())


def create_backup(source: Path) -> Path:
    """Copy `source` next to itself with the backup suffix and return the copy's path."""
    backup = source.with_name(source.name + BACKUP_SUFFIX)
    shutil.copy2(str(source), str(backup))
    logger.log("file.backup", LogLevel.INFO, file=str(source), backup=str(backup))
    return backup


def commit_rename(
        source: Path,
        target: Path,
        dry_run: bool = False,
        backup: bool = False,
        confirm: Callable[[Path, Path], bool] | None = None,
        oplog=None,
) -> str:
    """
    Move `source` to `target` once every precondition holds.

    Steps, in order: validate (source exists, target differs and is free), ask
    `confirm` if given, stop here in dry-run, back up if requested, move with
    os.rename, then append the move to `oplog` (anything with a `record(old, new)`).

    Returns:
        One of STATUS_UNCHANGED, STATUS_DECLINED, STATUS_DRY_RUN or STATUS_OK.

    Raises:
        NotFoundError: `source` is not an existing regular file.
        CollisionError: `target` already exists.
        OSError: the move itself failed.
    """
    source = Path(source)
    target = Path(target)
    if not source.is_file():
        raise NotFoundError(f"File not found: {source}")

    if source == target:
        logger.log("file.unchanged", LogLevel.INFO, file=str(source), msg="No changes needed")
        return STATUS_UNCHANGED

    if target.exists():
        raise CollisionError(source, target)

    if confirm is not None and not confirm(source, target):
        logger.log("file.declined", LogLevel.INFO, file=str(source))
        return STATUS_DECLINED

    if dry_run:
        logger.log("file.rename", LogLevel.INFO, dry_run=True, old=source.name, new=target.name)
        return STATUS_DRY_RUN

    if backup:
        create_backup(source)

    os.rename(source, target)
    logger.log("file.rename", LogLevel.INFO, old=source.name, new=target.name)

    if oplog is not None:
        oplog.record(source, target)
    return STATUS_OK
