"""
Template rendering for the template stage.

Placeholders are filled from the source path, never from the name the other
stages produced:

- {basename}   source name without its last extension
- {extension}  source extension without the dot ("" when there is none)
- {dirname}    name of the source's parent directory
- {date}       YYYYMMDD
- {datetime}   YYYYMMDD_HHMMSS
- {counter}    template counter, zero padded to 3 digits
- {random}     4 lowercase alphanumerics
- {hash}       first 8 hex digits of the source file's MD5, or "hash"

Unknown placeholders are left as they are.
"""
from pathlib import Path

from renamer.transform.custom import random_token
from renamer.utils import COUNTER_WIDTH, file_util, time_util


def render_template(template: str, ctx, counter: int) -> str:
    """Fill every known placeholder in `template` for the file in `ctx`."""
    source = Path(ctx.source_path)
    stem, extension = file_util.split_extension(source.name)

    result = template
    result = result.replace("{basename}", stem)
    result = result.replace("{extension}", extension)
    result = result.replace("{dirname}", source.parent.name)
    result = result.replace("{date}", time_util.date_stamp(ctx.now))
    result = result.replace("{datetime}", time_util.datetime_stamp(ctx.now))
    result = result.replace("{counter}", f"{counter:0{COUNTER_WIDTH}d}")

    if "{random}" in result:
        result = result.replace("{random}", random_token(ctx.rng))

    if "{hash}" in result:
        result = result.replace("{hash}", file_util.file_hash(source) or "hash")

    return result
