"""
Utilities to build media-server style filenames for shows and movies.

The builder produces one of four canonical forms:

- "Show Name (Year) - S01E01 - Episode Title.ext"
- "Show Name (Year) - E01.ext"
- "Movie Name (Year) - Part 1.ext"
- "Movie Name (Year).ext"

Notes:
- The middle segment is chosen by precedence: part, then season+episode, then
  episode alone. Supplying part together with episode is rejected before a
  descriptor is ever built, so part never shares a name with an episode token.
- The year and episode title are optional and simply omitted when absent.
- Parts are sanitized individually and the assembled name is sanitized once
  more as a whole before the extension is appended.

Example:
    build_filename(MediaDescriptor(show_name="Epic Movie", year=2023, part=1), "mp4")
    -> "Epic Movie (2023) - Part 1.mp4"
"""
from dataclasses import dataclass, replace

from renamer.utils import file_util


@dataclass(frozen=True)
class MediaDescriptor:
    """Structured fields for one media file; every field is optional."""
    show_name: str | None = None
    year: int | None = None
    season: int | None = None
    episode: int | None = None
    part: int | None = None
    episode_title: str | None = None

    def merged_with(self, **fields) -> "MediaDescriptor":
        """Return a copy with the given fields replaced."""
        return replace(self, **fields)


def middle_segment(descriptor: MediaDescriptor) -> str:
    """
    Build the numbering segment of the filename.

    Rules (first match wins):
    1. part present -> " - Part {part}"
    2. season and episode present -> " - S{season:02}E{episode:02}"
    3. episode present -> " - E{episode:02}"
    4. otherwise no segment.
    """
    if descriptor.part is not None:
        return f" - Part {descriptor.part}"
    if descriptor.season is not None and descriptor.episode is not None:
        return f" - S{descriptor.season:02d}E{descriptor.episode:02d}"
    if descriptor.episode is not None:
        return f" - E{descriptor.episode:02d}"
    return ""


def build_filename(descriptor: MediaDescriptor, extension: str) -> str:
    """
    Compose the final filename for a media descriptor.

    Parameters:
    - descriptor (MediaDescriptor): Show/movie name, year, numbering and title.
    - extension (str): File extension without the leading dot (e.g. "mkv").

    Returns:
    - filename (str): Sanitized name followed by ".{extension}".
    """
    result = file_util.sanitize_filename(descriptor.show_name or "")

    if descriptor.year is not None:
        result = f"{result} ({descriptor.year})"

    result += middle_segment(descriptor)

    if descriptor.episode_title:
        result = f"{result} - {file_util.sanitize_filename(descriptor.episode_title)}"

    result = file_util.sanitize_filename(result)
    return f"{result}.{extension}"
