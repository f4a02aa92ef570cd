"""
Media-mode renaming for show episodes and movie parts.

Package organization:
- extractor: Heuristic recovery of season, episode and title from an existing
  filename (first matching pattern wins, absence means "leave unset").
- formatter: MediaDescriptor and the canonical filename builder
  ("Show (Year) - S01E02 - Title.ext", "Movie (Year) - Part 1.ext", ...).
- batch: Option validation, per-file descriptor resolution and the sequential
  batch loop with its success/failure tally.

Example:
    from pathlib import Path
    import renamer.media as media
    options = media.build_options(show_name="Amazing Show", year="2024", season="1")
    report = media.rename_media_files([Path("Amazing_Show_E05_Pilot.mkv")], options)
"""
from .extractor import (
    Extraction,
    extract,
    extract_episode_number,
    extract_season_number,
    extract_title,
)
from .formatter import (
    MediaDescriptor,
    build_filename,
)
from .batch import (
    MediaOptions,
    build_options,
    propose_media_path,
    rename_media_file,
    rename_media_files,
)

__all__ = [
    # Extraction
    "Extraction",
    "extract",
    "extract_title",
    "extract_episode_number",
    "extract_season_number",
    # Formatting
    "MediaDescriptor",
    "build_filename",
    # Batch processing
    "MediaOptions",
    "build_options",
    "propose_media_path",
    "rename_media_file",
    "rename_media_files",
]
