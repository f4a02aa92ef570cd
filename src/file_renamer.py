#!/usr/bin/env python3
"""
file-renamer: batch and single file renaming with transformation pipelines.

Supports find/replace, regex substitution with capture groups, named custom
transforms, templates, prefix/suffix and case conversion, with dry-run,
backups, interactive confirmation, an operation log and undo from that log.
"""

import argparse
import os
import sys
import time
from pathlib import Path

import renamer
from renamer import oplog
from renamer.transform import (
    AddPrefix,
    AddSuffix,
    CaseConvert,
    Counters,
    CustomTransform,
    RegexReplace,
    RenameRule,
    Replace,
    Template,
    rename_directory,
    rename_transformed_file,
    validate_options,
)
from renamer.utils import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, LogLevel, RenamerError, logger
from renamer.utils.time_util import get_runtime_string


def build_rule(args) -> RenameRule:
    """Collect the transformation options into a RenameRule."""
    stages = []
    if args.replace and args.replace[0]:
        stages.append(Replace(*args.replace))
    if args.regex:
        stages.append(RegexReplace(*args.regex))
    if args.transform:
        stages.append(CustomTransform(args.transform))
    if args.prefix:
        stages.append(AddPrefix(args.prefix))
    if args.suffix:
        stages.append(AddSuffix(args.suffix))
    if args.case:
        stages.append(CaseConvert(args.case))
    if args.template:
        stages.append(Template(args.template))
    return RenameRule(stages=tuple(stages), new_name=args.name or None)


def confirm_rename(source: Path, target: Path) -> bool:
    answer = input(f"Rename '{source.name}' to '{target.name}'? [y/N] ").strip().lower()
    return answer in ("y", "yes")


def _verbosity_level(verbose: int) -> LogLevel:
    if verbose >= 2:
        return LogLevel.TRACE
    if verbose == 1:
        return LogLevel.DEBUG
    return logger.level_from_name(DEFAULT_LOG_LEVEL)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-renamer",
        description="A versatile tool for renaming files with pattern matching, safety features, "
                    "and comprehensive options for batch and single file operations.",
        epilog='Example: file-renamer -d /photos -p "IMG_*.jpg" --regex "IMG_(.*)" "vacation_\\1"',
    )
    parser.add_argument("-f", "--file", help="Single file to rename")
    parser.add_argument("-n", "--name", help="New name for single file operation")
    parser.add_argument("-d", "--directory", help="Directory to process for batch operations")
    parser.add_argument("-p", "--pattern", help="Glob pattern of files to match in --directory (default: *)")
    parser.add_argument("-r", "--replace", nargs=2, metavar=("OLD", "NEW"), help="Find and replace operation")
    parser.add_argument("--regex", nargs=2, metavar=("PATTERN", "REPLACEMENT"),
                        help="Regex substitution; use \\1, \\2 ... for capture groups")
    parser.add_argument("--transform", metavar="FUNCTION",
                        help="Custom transformation: date, datetime, counter, random, hash or parsedate")
    parser.add_argument("--template", help="Template with {basename}, {extension}, {dirname}, {date}, "
                                           "{datetime}, {counter}, {random} and {hash} placeholders")
    parser.add_argument("--prefix", help="Add prefix to filenames")
    parser.add_argument("--suffix", help="Add suffix to filenames (before the extension)")
    parser.add_argument("--case", help="Case conversion: upper, lower or title")
    parser.add_argument("--dry-run", action="store_true", help="Preview changes without executing")
    parser.add_argument("--backup", action="store_true", help="Create backup files before renaming")
    parser.add_argument("--interactive", action="store_true", help="Confirm each operation")
    parser.add_argument("--recursive", action="store_true", help="Process subdirectories")
    parser.add_argument("--verbose", action="count", default=0, help="Increase verbosity (repeatable)")
    parser.add_argument("--log-file", help="Log operations to this file (default: $RENAMER_LOG_FILE)")
    parser.add_argument("--undo", metavar="FILE", help="Undo operations from the specified log file")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {renamer.__version__}")
    return parser


def run_undo(log_path: Path, dry_run: bool) -> int:
    try:
        result = oplog.undo(log_path, dry_run=dry_run)
    except RenamerError as e:
        logger.log("undo.error", LogLevel.ERROR, msg=str(e))
        return 1
    logger.safe_print(result.summary())
    return 1 if result.errors else 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger.set_log_level(_verbosity_level(args.verbose))

    log_file = args.log_file or DEFAULT_LOG_FILE
    operation_log = None
    if log_file:
        log_path = Path(log_file).expanduser()
        logger.set_log_file(log_path)
        operation_log = oplog.OperationLog(log_path)
        logger.log("startup.log_file", LogLevel.INFO, path=str(log_path))

    logger.log("startup", LogLevel.INFO, tool="file-renamer", version=renamer.__version__, pid=os.getpid())

    if args.undo:
        return run_undo(Path(args.undo).expanduser(), args.dry_run)

    try:
        rule = build_rule(args)
        validate_options(rule, single_file=args.file, directory=args.directory, pattern=args.pattern)
    except RenamerError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=str(e))
        logger.safe_print("Use --help for usage information", file=sys.stderr)
        return 1

    logger.log(
        "startup.config",
        LogLevel.DEBUG,
        dry_run=args.dry_run,
        backup=args.backup,
        interactive=args.interactive,
        recursive=args.recursive,
        file=args.file,
        directory=args.directory,
        pattern=args.pattern,
        stages=", ".join(type(s).__name__ for s in rule.ordered_stages()),
        new_name=rule.new_name,
    )

    confirm = confirm_rename if args.interactive else None
    counters = Counters()

    if args.file:
        try:
            source, target, status = rename_transformed_file(
                Path(args.file), rule, counters,
                dry_run=args.dry_run, backup=args.backup, confirm=confirm, oplog=operation_log,
            )
        except (RenamerError, OSError) as e:
            logger.log("rename.error", LogLevel.ERROR, file=args.file, error=str(e))
            return 1
        logger.safe_print(f"{status}: {source} → {target}")
        return 0

    start_time = time.time()
    report = rename_directory(
        Path(args.directory), rule, pattern=args.pattern or "*", recursive=args.recursive,
        counters=counters, dry_run=args.dry_run, backup=args.backup, confirm=confirm, oplog=operation_log,
    )
    logger.safe_print(report.summary())
    logger.safe_print(f"Runtime: {get_runtime_string(time.time() - start_time)}")
    if args.dry_run:
        logger.safe_print("\n🧪 Dry-run mode: no changes were made.")
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
