"""
The transformation pipeline: turn a filename into its new name under a RenameRule.

Stages run in the fixed order replace -> regex -> custom -> prefix -> suffix ->
case. A non-empty template is rendered after all of them and its output
replaces theirs outright, so with a template set the earlier stages only
contribute their side effects (trace lines, the custom counter).

A stage that fails with TransformError is logged and treated as identity; the
pipeline itself never raises for a bad stage.
"""
from pathlib import Path

from renamer.transform.stages import Counters, RenameRule, Template, TransformContext
from renamer.utils import TransformError, logger
from renamer.utils.logger import LogLevel


def _apply_stage(stage, name: str, ctx: TransformContext) -> str:
    stage_name = type(stage).__name__
    try:
        result = stage.apply(name, ctx)
    except TransformError as e:
        logger.log("transform.stage.error", LogLevel.WARN, stage=stage_name, name=name, error=str(e))
        return name
    logger.log("transform.stage", LogLevel.DEBUG, stage=stage_name, before=name, after=result)
    return result


def apply_rule(base_name: str, rule: RenameRule, ctx: TransformContext) -> str:
    """
    Run `rule` over `base_name` (file name including its extension).

    Parameters:
    - base_name (str): Current file name, no directory.
    - rule (RenameRule): Stages to apply and an optional explicit new name.
    - ctx (TransformContext): Source path, counters, clock and random source.

    Returns:
    - final_name (str): The proposed new file name.
    """
    template = rule.template

    if rule.new_name and template is None:
        logger.log("transform.new_name", LogLevel.DEBUG, before=base_name, after=rule.new_name)
        return rule.new_name

    result = base_name
    for stage in rule.ordered_stages():
        if isinstance(stage, Template):
            continue
        result = _apply_stage(stage, result, ctx)

    if template is not None:
        result = _apply_stage(template, result, ctx)

    return result


def apply(base_name: str, rule: RenameRule, source_path: Path, counters: Counters | None = None) -> str:
    """Convenience wrapper building a fresh TransformContext for one call."""
    ctx = TransformContext(source_path=Path(source_path), counters=counters if counters is not None else Counters())
    return apply_rule(base_name, rule, ctx)


def propose_target(source: Path, rule: RenameRule, ctx: TransformContext) -> Path:
    """New path for `source`: same directory, transformed name."""
    return source.parent / apply_rule(source.name, rule, ctx)
