#!/usr/bin/env python3
"""
media-renamer: rename movie and TV files to media-server naming conventions.

    TV Shows:      Show Name (Year) - S01E01 - Episode Title.ext
    TV (no title): Show Name (Year) - S01E01.ext
    Movies:        Movie Name (Year).ext
    Movie Parts:   Movie Name (Year) - Part 1.ext

Episode numbers and titles are recovered from the existing filenames by
default; --sequential numbers files from --episode/--part instead.
"""

import argparse
import os
import sys
import time
from pathlib import Path

import renamer
from renamer import media, oplog
from renamer.utils import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, LogLevel, RenamerError, logger
from renamer.utils.time_util import get_runtime_string


def confirm_rename(source: Path, target: Path) -> bool:
    answer = input(f"Rename '{source.name}' to '{target.name}'? [y/N] ").strip().lower()
    return answer in ("y", "yes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-renamer",
        description="Rename movie and TV show files with proper season and episode formatting "
                    "(Plex / Netflix / Apple TV compatible).",
        epilog='Example: media-renamer -s 1 -y 2024 -n "Amazing Show" *.mkv',
    )
    parser.add_argument("files", nargs="*", help="Video files to rename")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Show what would be renamed without renaming")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Verbose output (repeatable)")
    parser.add_argument("-i", "--interactive", action="store_true", help="Ask for confirmation before each rename")
    parser.add_argument("-s", "--season", help="Set season number")
    parser.add_argument("-e", "--episode", help="Set starting episode number")
    parser.add_argument("-p", "--part", help="Set starting part number (for movies)")
    parser.add_argument("-y", "--year", help="Set release year")
    parser.add_argument("-n", "--name", help="Set show/movie name (overrides filename)")
    parser.add_argument("--no-auto-titles", action="store_true",
                        help="Disable automatic title extraction from filenames")
    parser.add_argument("--sequential", action="store_true",
                        help="Use sequential numbering instead of extracted numbers")
    parser.add_argument("--log-file", help="Record renames to this file for undo (default: $RENAMER_LOG_FILE)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {renamer.__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose >= 2:
        logger.set_log_level(LogLevel.TRACE)
    elif args.verbose == 1:
        logger.set_log_level(LogLevel.DEBUG)
    else:
        logger.set_log_level(logger.level_from_name(DEFAULT_LOG_LEVEL))

    if not args.files:
        logger.log("startup.error", LogLevel.ERROR, msg="No files specified")
        logger.safe_print("Use --help for usage information.", file=sys.stderr)
        return 1

    try:
        options = media.build_options(
            show_name=args.name,
            year=args.year,
            season=args.season,
            episode=args.episode,
            part=args.part,
            auto_titles=not args.no_auto_titles,
            use_extracted_numbers=not args.sequential,
            dry_run=args.dry_run,
        )
    except RenamerError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=str(e))
        return 1

    operation_log = None
    log_file = args.log_file or DEFAULT_LOG_FILE
    if log_file:
        operation_log = oplog.OperationLog(Path(log_file).expanduser())

    logger.log(
        "media.start",
        LogLevel.DEBUG,
        pid=os.getpid(),
        dry_run=options.dry_run,
        interactive=args.interactive,
        season=options.season,
        episode=options.episode,
        part=options.part,
        year=options.year,
        show_name=options.show_name or "auto-detect",
        auto_titles=options.auto_titles,
        sequential=not options.use_extracted_numbers,
        files=len(args.files),
    )

    start_time = time.time()
    report = media.rename_media_files(
        [Path(f) for f in args.files],
        options,
        confirm=confirm_rename if args.interactive else None,
        oplog=operation_log,
    )

    for source, target, status in report.results:
        if target is not None:
            logger.safe_print(f"{status}: {source.name} → {target.name}")
        else:
            logger.safe_print(f"{status}: {source}")
    logger.safe_print(report.summary())
    logger.safe_print(f"Runtime: {get_runtime_string(time.time() - start_time)}")

    if report.has_failures:
        logger.log("media.summary", LogLevel.WARN, msg=f"Completed with {report.failed} error(s)")
    else:
        logger.log("media.summary", LogLevel.INFO, msg="All files processed successfully")
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
