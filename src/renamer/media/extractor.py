"""
Module for recovering season numbers, episode numbers and episode titles from
existing media filenames.

Every extractor works on the base name only (directory and extension removed)
and tries a fixed list of patterns in priority order; the first pattern that
matches wins, later patterns are never consulted. Absence of a match is returned
as None and must be read as "leave the field unset", never as zero.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from renamer.utils import file_util

# Title patterns, highest priority first. Each captures the title in the last group.
TITLE_PATTERNS = [
    re.compile(r"Part\s*[0-9]+\s*-\s*(.+)$"),
    re.compile(r"^.*[_\s]+E[0-9]+[_\s]+(.+)$"),
    re.compile(r"^[^-]+-\s*(.+)$"),
    re.compile(r"(Episode|Ep)\s*[0-9]+\s*-\s*(.+)$"),
    re.compile(r"S[0-9]+E[0-9]+[_\s]*-?[_\s]*(.+)$"),
    re.compile(r"\[[0-9]+\]\s*(.+)$"),
    re.compile(r"\([0-9]+\)\s*(.+)$"),
]

# Last resort title: "Prefix_Title" / "Prefix Title" with no numbering markers at all
BARE_TITLE_PATTERN = re.compile(r"^[^0-9]*[_\s]+([^0-9].*)$")
NUMBERING_MARKERS = re.compile(r"Part|Episode|Ep|S[0-9]|E[0-9]")

# Episode number patterns, highest priority first. The number is the last group.
EPISODE_PATTERNS = [
    re.compile(r"Part\s*([0-9]+)"),
    re.compile(r"(Episode|Ep)\s*([0-9]+)"),
    re.compile(r"S[0-9]+E([0-9]+)"),
    re.compile(r"E([0-9]+)"),
    re.compile(r"\[([0-9]+)\]"),
    re.compile(r"\(([0-9]+)\)"),
    re.compile(r"[^0-9]([0-9]+)[^0-9]*$"),
]

SEASON_PATTERNS = [
    re.compile(r"S([0-9]+)E[0-9]+"),
    re.compile(r"Season\s*([0-9]+)"),
]


@dataclass(frozen=True)
class Extraction:
    """Fields recovered from one filename; None means no pattern matched."""
    season: int | None = None
    episode: int | None = None
    title: str | None = None


def base_name(filename: str | Path) -> str:
    """Strip the directory and the last extension: 'dir/Show S01E02.mkv' -> 'Show S01E02'."""
    return Path(filename).stem


def clean_title(raw: str) -> str:
    """Collapse '_' and '-' separators to single spaces and trim."""
    return file_util.normalize_text(raw)


def extract_title(filename: str | Path) -> str | None:
    """
    Extract a human episode title from a filename.
    Examples:
      "Show S01E05 - Pilot.mkv" -> "Pilot"
      "Movie Part 2 - The Return.mp4" -> "The Return"
      "Show_E03_Big_Day.mkv" -> "Big Day"
    Returns None if no pattern matches or the captured title is blank.
    """
    stem = base_name(filename)

    for pattern in TITLE_PATTERNS:
        m = pattern.search(stem)
        if m:
            return clean_title(m.group(m.lastindex)) or None

    if not NUMBERING_MARKERS.search(stem):
        m = BARE_TITLE_PATTERN.search(stem)
        if m:
            return clean_title(m.group(1)) or None

    return None


def extract_episode_number(filename: str | Path) -> int | None:
    """Extract the episode (or part) number from a filename."""
    stem = base_name(filename)
    for pattern in EPISODE_PATTERNS:
        m = pattern.search(stem)
        if m:
            return int(m.group(m.lastindex))
    return None


def extract_season_number(filename: str | Path) -> int | None:
    """Extract the season number from "S01E05" or "Season 1" style names."""
    stem = base_name(filename)
    for pattern in SEASON_PATTERNS:
        m = pattern.search(stem)
        if m:
            return int(m.group(1))
    return None


def extract(filename: str | Path) -> Extraction:
    """Run the three independent extractors over one filename."""
    return Extraction(
        season=extract_season_number(filename),
        episode=extract_episode_number(filename),
        title=extract_title(filename),
    )
