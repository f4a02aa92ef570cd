# python
"""Media-mode renaming: resolve structured fields per file and rename in place.

For every file the module merges the user's options with what the pattern
extractor recovers from the existing name, builds the canonical filename and
commits the rename next to the original. With extraction disabled, episode and
part numbers are assigned sequentially from the starting values instead.
"""
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from tqdm import tqdm

from renamer.media import extractor, formatter
from renamer.media.formatter import MediaDescriptor
from renamer.utils import (
    STATUS_FAIL,
    STATUS_SKIP,
    VIDEO_EXTENSIONS,
    RenamerError,
    UnsupportedTypeError,
    ValidationError,
    file_util,
    logger,
)
from renamer.utils.logger import LogLevel
from renamer.utils.report import BatchReport

_NUMBER = re.compile(r"^[0-9]+$")
_YEAR = re.compile(r"^[0-9]{4}$")


@dataclass(frozen=True)
class MediaOptions:
    """Resolved media-mode options; immutable for the whole batch."""
    show_name: str | None = None
    year: int | None = None
    season: int | None = None
    episode: int | None = None
    part: int | None = None
    auto_titles: bool = True
    use_extracted_numbers: bool = True
    dry_run: bool = False


def _parse_number(value, label: str) -> int | None:
    if value is None or value == "":
        return None
    if not _NUMBER.match(str(value)):
        raise ValidationError(f"{label} must be a number: {value}")
    return int(value)


def build_options(
        show_name: str | None = None,
        year=None,
        season=None,
        episode=None,
        part=None,
        auto_titles: bool = True,
        use_extracted_numbers: bool = True,
        dry_run: bool = False,
) -> MediaOptions:
    """
    Validate raw option values and build MediaOptions.

    Raises:
        ValidationError: a number is not numeric, the year is not four digits,
            or both part and episode are given.
    """
    season_num = _parse_number(season, "Season")
    episode_num = _parse_number(episode, "Episode")
    part_num = _parse_number(part, "Part")

    year_num = None
    if year is not None and year != "":
        if not _YEAR.match(str(year)):
            raise ValidationError(f"Year must be a 4-digit number: {year}")
        year_num = int(year)

    if part_num is not None and episode_num is not None:
        raise ValidationError("Cannot specify both --part and --episode")

    return MediaOptions(
        show_name=show_name or None,
        year=year_num,
        season=season_num,
        episode=episode_num,
        part=part_num,
        auto_titles=auto_titles,
        use_extracted_numbers=use_extracted_numbers,
        dry_run=dry_run,
    )


def is_video_file(file: Path) -> bool:
    return file.suffix.lower() in VIDEO_EXTENSIONS


def derive_show_name(file: Path) -> str:
    """Guess a show name from the stem: 'My_Show_E01_Pilot' -> 'My Show'."""
    name = re.sub(r"_E[0-9].*$", "", file.stem)
    name = re.sub(r"[_-]", " ", name)
    return re.sub(r" +", " ", name)


def resolve_descriptor(
        file: Path, options: MediaOptions, episode: int | None = None, part: int | None = None
) -> MediaDescriptor:
    """
    Merge options with values extracted from the filename.

    Priority:
    1. Show name and year always come from the options (show name falls back to
       the filename when absent).
    2. With extraction enabled an extracted episode number replaces `episode`,
       while an extracted season only fills a season the options left unset.
    3. The episode title comes from extraction only, when auto titles are on.
    """
    descriptor = MediaDescriptor(
        show_name=options.show_name or derive_show_name(file),
        year=options.year,
        season=options.season,
        episode=episode,
        part=part,
    )

    if options.use_extracted_numbers:
        extracted_episode = extractor.extract_episode_number(file)
        if extracted_episode is not None:
            descriptor = descriptor.merged_with(episode=extracted_episode)
            logger.log("media.extract", LogLevel.DEBUG, file=file.name, episode=extracted_episode)
        if descriptor.season is None:
            extracted_season = extractor.extract_season_number(file)
            if extracted_season is not None:
                descriptor = descriptor.merged_with(season=extracted_season)
                logger.log("media.extract", LogLevel.DEBUG, file=file.name, season=extracted_season)

    if options.auto_titles:
        episode_title = extractor.extract_title(file)
        if episode_title:
            descriptor = descriptor.merged_with(episode_title=episode_title)
            logger.log("media.extract", LogLevel.DEBUG, file=file.name, title=episode_title)

    return descriptor


def propose_media_path(
        file: Path, options: MediaOptions, episode: int | None = None, part: int | None = None
) -> Path:
    """Return the canonical path for `file` in its own directory."""
    descriptor = resolve_descriptor(file, options, episode, part)
    extension = file.name.rpartition(".")[2]
    return file.parent / formatter.build_filename(descriptor, extension)


def rename_media_file(
        file: Path,
        options: MediaOptions,
        episode: int | None = None,
        part: int | None = None,
        confirm: Callable[[Path, Path], bool] | None = None,
        oplog=None,
) -> tuple[Path, Path | None, str]:
    """
    Rename one media file.

    Returns:
        (source, target, status) as produced by `file_util.commit_rename`.

    Raises:
        NotFoundError: the path does not exist.
        UnsupportedTypeError: the path is a directory or not a video file.
        CollisionError: the canonical name is already taken.
    """
    file = Path(file)
    if file.exists() and not file.is_file():
        raise UnsupportedTypeError(f"Not a regular file: {file}")
    if file.is_file() and not is_video_file(file):
        raise UnsupportedTypeError(f"Skipping non-video file: {file}")

    target = propose_media_path(file, options, episode, part)
    logger.log("media.propose", LogLevel.DEBUG, old=file.name, new=target.name)
    status = file_util.commit_rename(file, target, dry_run=options.dry_run, confirm=confirm, oplog=oplog)
    return file, target, status


def rename_media_files(
        files: list[Path],
        options: MediaOptions,
        confirm: Callable[[Path, Path], bool] | None = None,
        oplog=None,
) -> BatchReport:
    """
    Rename a list of media files, one at a time, in the given order.

    A failing file is counted and the batch moves on. In sequential mode
    (extraction disabled) episode and part advance by one after every file that
    did not fail.
    """
    report = BatchReport()
    current_episode = options.episode
    current_part = options.part
    start_time = time.time()

    for file in tqdm([Path(f) for f in files], desc="Renaming media", disable=confirm is not None):
        try:
            report.add(*rename_media_file(file, options, current_episode, current_part, confirm, oplog))
        except UnsupportedTypeError as e:
            logger.log("media.skip", LogLevel.WARN, file=str(file), reason=str(e))
            report.add(file, None, STATUS_SKIP)
        except (RenamerError, OSError) as e:
            logger.log("media.error", LogLevel.ERROR, file=str(file), error=str(e))
            report.add(file, None, STATUS_FAIL)
            continue

        if not options.use_extracted_numbers:
            if current_episode is not None:
                current_episode += 1
            if current_part is not None:
                current_part += 1

    report.log_end("media.end", time.time() - start_time)
    return report
