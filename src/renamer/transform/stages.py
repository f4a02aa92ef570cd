"""
Stage variants, rename rules and the per-run state threaded through them.

A RenameRule is a collection of stages. Whatever order the stages were given
in, they always run in STAGE_ORDER: replace, regex, custom, prefix, suffix,
case, and finally template, whose output replaces everything before it.
"""
import random
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from renamer.transform.custom import apply_custom_transform
from renamer.transform.template import render_template
from renamer.utils import TransformError, ValidationError, file_util

CASE_MODES = ("upper", "lower", "title")

_BACKREF = re.compile(r"\\([0-9])")


@dataclass
class Counters:
    """Counters for the `counter` transform and the {counter} placeholder; they never share a value."""
    custom: int = 0
    template: int = 0

    def next_custom(self) -> int:
        self.custom += 1
        return self.custom

    def next_template(self) -> int:
        self.template += 1
        return self.template


@dataclass
class TransformContext:
    """Everything a stage may look at besides the name it transforms."""
    source_path: Path
    counters: Counters = field(default_factory=Counters)
    now: datetime = field(default_factory=datetime.now)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Replace:
    """Literal substring substitution, all occurrences."""
    old: str
    new: str = ""

    def apply(self, name: str, ctx: TransformContext) -> str:
        if not self.old:
            return name
        return name.replace(self.old, self.new)


def expand_backrefs(match: re.Match, replacement: str) -> str:
    r"""Expand \0-\9 in `replacement` from `match`; every other character is literal."""
    def _group(m):
        index = int(m.group(1))
        if index > (match.re.groups or 0):
            raise TransformError(f"invalid group reference \\{index}")
        return match.group(index) or ""

    return _BACKREF.sub(_group, replacement)


def substitute_all(compiled: re.Pattern, replacement: str, text: str) -> str:
    """
    Replace every match of `compiled` in `text`.

    An empty match starting where the previous match ended is not replaced,
    so "(.*)" matches "a.txt" once instead of once more at the end.
    """
    parts = []
    last_end = 0
    previous_end = None
    for m in compiled.finditer(text):
        if m.start() == m.end() == previous_end:
            continue
        parts.append(text[last_end:m.start()])
        parts.append(expand_backrefs(m, replacement))
        last_end = previous_end = m.end()
    parts.append(text[last_end:])
    return "".join(parts)


@dataclass(frozen=True)
class RegexReplace:
    r"""Regular-expression substitution, all occurrences, with \1-style back-references."""
    pattern: str
    replacement: str = ""

    def apply(self, name: str, ctx: TransformContext) -> str:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise TransformError(f"invalid regex '{self.pattern}': {e}") from e
        return substitute_all(compiled, self.replacement, name)


@dataclass(frozen=True)
class CustomTransform:
    """One of the named transforms in `renamer.transform.custom`."""
    kind: str

    def apply(self, name: str, ctx: TransformContext) -> str:
        return apply_custom_transform(name, self.kind, ctx)


@dataclass(frozen=True)
class AddPrefix:
    text: str

    def apply(self, name: str, ctx: TransformContext) -> str:
        return f"{self.text}{name}"


@dataclass(frozen=True)
class AddSuffix:
    """Suffix goes right before the last extension separator."""
    text: str

    def apply(self, name: str, ctx: TransformContext) -> str:
        return file_util.insert_before_extension(name, self.text)


def title_case(text: str) -> str:
    """Capitalise the first letter of every whitespace-delimited word."""
    return re.sub(r"(^|\s)(\S)", lambda m: m.group(1) + m.group(2).upper(), text)


@dataclass(frozen=True)
class CaseConvert:
    mode: str

    def __post_init__(self):
        if self.mode not in CASE_MODES:
            raise ValidationError(f"Invalid case conversion: {self.mode} (must be upper, lower, or title)")

    def apply(self, name: str, ctx: TransformContext) -> str:
        if self.mode == "upper":
            return name.upper()
        if self.mode == "lower":
            return name.lower()
        return title_case(name)


@dataclass(frozen=True)
class Template:
    """Placeholder template rendered from the source path; replaces the accumulated name."""
    text: str

    def apply(self, name: str, ctx: TransformContext) -> str:
        return render_template(self.text, ctx, ctx.counters.next_template())


STAGE_ORDER = (Replace, RegexReplace, CustomTransform, AddPrefix, AddSuffix, CaseConvert, Template)


@dataclass(frozen=True)
class RenameRule:
    """
    Declarative set of transformations for one batch.

    `new_name` is an explicit literal name for single-file use; when set it is
    used instead of the stages, although a non-empty template still wins.
    """
    stages: tuple = ()
    new_name: str | None = None

    def __post_init__(self):
        for stage in self.stages:
            if type(stage) not in STAGE_ORDER:
                raise ValidationError(f"Unknown stage type: {type(stage).__name__}")

    def ordered_stages(self) -> list:
        """Stages sorted into STAGE_ORDER; stages of the same kind keep their given order."""
        return sorted(self.stages, key=lambda s: STAGE_ORDER.index(type(s)))

    @property
    def template(self) -> Template | None:
        for stage in self.stages:
            if isinstance(stage, Template) and stage.text:
                return stage
        return None

    @property
    def is_empty(self) -> bool:
        return not self.stages and not self.new_name
