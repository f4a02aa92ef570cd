# python
"""Transform-mode renaming for a single file or a directory batch.

The batch scans a directory once for files matching a glob pattern, runs the
transformation pipeline over each name and commits the result through
`file_util.commit_rename`. Files are handled strictly one after another; a
failure is counted and the batch continues with the next file.
"""
import random
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

from tqdm import tqdm

from renamer.transform import pipeline
from renamer.transform.stages import Counters, RenameRule, TransformContext
from renamer.utils import STATUS_FAIL, NotFoundError, RenamerError, ValidationError, file_util, logger
from renamer.utils.logger import LogLevel
from renamer.utils.report import BatchReport


def validate_options(
        rule: RenameRule,
        single_file: Path | None = None,
        directory: Path | None = None,
        pattern: str | None = None,
) -> None:
    """
    Check that a combination of selection options and rule makes sense.

    Raises:
        ValidationError: on conflicting selections or a rule with nothing to do.
        NotFoundError: the selected file or directory does not exist.
    """
    if single_file and directory:
        raise ValidationError("Cannot specify both --file and --directory")
    if single_file and pattern:
        raise ValidationError("Cannot specify both --file and --pattern")
    if not single_file and not directory:
        raise ValidationError("No operation specified")

    if single_file:
        if rule.is_empty:
            raise ValidationError(
                "Single file operation requires at least one transformation option "
                "(--name, --replace, --regex, --transform, --template, --prefix, --suffix, or --case)"
            )
        if not Path(single_file).is_file():
            raise NotFoundError(f"File does not exist: {single_file}")

    if directory:
        if not rule.stages:
            raise ValidationError(
                "Batch operation requires at least one transformation option "
                "(--replace, --regex, --transform, --template, --prefix, --suffix, or --case)"
            )
        if not Path(directory).is_dir():
            raise NotFoundError(f"Directory does not exist: {directory}")


def rename_transformed_file(
        source: Path,
        rule: RenameRule,
        counters: Counters,
        dry_run: bool = False,
        backup: bool = False,
        confirm: Callable[[Path, Path], bool] | None = None,
        oplog=None,
        now: datetime | None = None,
        rng: random.Random | None = None,
) -> tuple[Path, Path | None, str]:
    """
    Transform and rename one file.

    Returns:
        (source, target, status) as produced by `file_util.commit_rename`.

    Raises:
        NotFoundError: `source` is not an existing regular file.
        CollisionError: the transformed name is already taken.
        OSError: the move failed.
    """
    source = Path(source)
    if not source.is_file():
        raise NotFoundError(f"File does not exist: {source}")

    ctx = TransformContext(
        source_path=source,
        counters=counters,
        now=now or datetime.now(),
        rng=rng or random.Random(),
    )
    target = pipeline.propose_target(source, rule, ctx)
    logger.log("transform.propose", LogLevel.DEBUG, old=source.name, new=target.name)

    status = file_util.commit_rename(source, target, dry_run=dry_run, backup=backup, confirm=confirm, oplog=oplog)
    return source, target, status


def rename_files(
        files: list[Path],
        rule: RenameRule,
        counters: Counters | None = None,
        dry_run: bool = False,
        backup: bool = False,
        confirm: Callable[[Path, Path], bool] | None = None,
        oplog=None,
        now: datetime | None = None,
        rng: random.Random | None = None,
) -> BatchReport:
    """Rename each file in `files` in order; per-file failures do not stop the batch."""
    counters = counters if counters is not None else Counters()
    rng = rng or random.Random()
    report = BatchReport()
    start_time = time.time()
    total = len(files)

    for index, file in enumerate(tqdm(files, desc="Renaming files", disable=confirm is not None), start=1):
        logger.log("transform.file", LogLevel.TRACE, index=index, total=total, file=str(file))
        try:
            report.add(*rename_transformed_file(
                file, rule, counters, dry_run=dry_run, backup=backup, confirm=confirm, oplog=oplog, now=now, rng=rng
            ))
        except (RenamerError, OSError) as e:
            logger.log("transform.error", LogLevel.ERROR, file=str(file), error=str(e))
            report.add(Path(file), None, STATUS_FAIL)

    report.log_end("transform.end", time.time() - start_time)
    return report


def rename_directory(
        directory: Path,
        rule: RenameRule,
        pattern: str = "*",
        recursive: bool = False,
        **kwargs,
) -> BatchReport:
    """
    Rename every regular file in `directory` matching `pattern`.

    The file list is taken once up front; files appearing later are not picked up.
    Keyword arguments are passed through to `rename_files`.

    Raises:
        NotFoundError: `directory` does not exist.
    """
    files = file_util.scan_files(Path(directory), pattern or "*", recursive)
    logger.log(
        "transform.scan",
        LogLevel.INFO,
        directory=str(directory),
        pattern=pattern or "*",
        recursive=recursive,
        found=len(files),
    )
    if not files:
        logger.log("transform.scan.empty", LogLevel.WARN, pattern=pattern or "*")
    return rename_files(files, rule, **kwargs)
