"""
Named custom transformations.

All kinds except `parsedate` append a token right before the extension:

- date      -> _YYYYMMDD
- datetime  -> _YYYYMMDD_HHMMSS
- counter   -> _001, _002, ... (custom counter, one step per call)
- random    -> _ + 4 lowercase alphanumerics
- hash      -> _ + first 8 hex digits of the source file's MD5, or _hash

`parsedate` instead rewrites a "Month D, YYYY" date inside the name to YYMMDD
in place and leaves the name untouched when no such date is present.
An unknown kind is logged and the name is returned unchanged.
"""
import re
import string

from renamer.utils import COUNTER_WIDTH, RANDOM_TOKEN_LENGTH, file_util, logger, time_util
from renamer.utils.logger import LogLevel

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

MONTH_DATE_REGEX = re.compile(
    r"(?<![A-Za-z])(" + "|".join(MONTHS) + r") ([0-9]{1,2}), ([0-9]{4})",
    re.IGNORECASE,
)

_RANDOM_ALPHABET = string.digits + string.ascii_lowercase


def random_token(rng, length: int = RANDOM_TOKEN_LENGTH) -> str:
    return "".join(rng.choice(_RANDOM_ALPHABET) for _ in range(length))


def parse_month_date(name: str) -> str:
    """
    Replace the first "Month D, YYYY" date with YYMMDD.
    Examples:
      "Meeting December 1, 2025.pdf" -> "Meeting 251201.pdf"
      "notes.txt" -> "notes.txt"
    """
    m = MONTH_DATE_REGEX.search(name)
    if not m:
        return name
    month = MONTHS[m.group(1).lower()]
    day = int(m.group(2))
    yy = m.group(3)[-2:]
    return f"{name[:m.start()]}{yy}{month:02d}{day:02d}{name[m.end():]}"


def _suffix_for(kind: str, ctx) -> str | None:
    if kind == "date":
        return f"_{time_util.date_stamp(ctx.now)}"
    if kind == "datetime":
        return f"_{time_util.datetime_stamp(ctx.now)}"
    if kind == "counter":
        return f"_{ctx.counters.next_custom():0{COUNTER_WIDTH}d}"
    if kind == "random":
        return f"_{random_token(ctx.rng)}"
    if kind == "hash":
        return f"_{file_util.file_hash(ctx.source_path) or 'hash'}"
    return None


def apply_custom_transform(name: str, kind: str, ctx) -> str:
    """Apply the custom transformation `kind` to `name`."""
    if kind == "parsedate":
        return parse_month_date(name)

    suffix = _suffix_for(kind, ctx)
    if suffix is None:
        logger.log("transform.custom.unknown", LogLevel.WARN, kind=kind)
        return name
    return file_util.insert_before_extension(name, suffix)
