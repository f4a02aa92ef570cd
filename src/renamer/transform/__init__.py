"""
General-purpose filename transformation.

Package organization:
- stages: Stage variants (Replace, RegexReplace, CustomTransform, AddPrefix,
  AddSuffix, CaseConvert, Template), RenameRule, Counters and TransformContext.
- custom: The named custom transforms (date, datetime, counter, random, hash,
  parsedate).
- template: Placeholder rendering for the template stage.
- pipeline: Runs a RenameRule over a filename in the fixed stage order.
- batch: Option validation and the single-file / directory batch loops.

Example:
    from pathlib import Path
    from renamer.transform import AddPrefix, Replace, RenameRule, apply
    rule = RenameRule(stages=(AddPrefix("NEW_"), Replace("_", "-")))
    apply("test_file.txt", rule, Path("test_file.txt"))  # -> "NEW_test-file.txt"
"""
from .stages import (
    CASE_MODES,
    AddPrefix,
    AddSuffix,
    CaseConvert,
    Counters,
    CustomTransform,
    RegexReplace,
    RenameRule,
    Replace,
    Template,
    TransformContext,
)
from .pipeline import (
    apply,
    apply_rule,
    propose_target,
)
from .batch import (
    rename_directory,
    rename_files,
    rename_transformed_file,
    validate_options,
)

__all__ = [
    # Stages and rules
    "CASE_MODES",
    "Replace",
    "RegexReplace",
    "CustomTransform",
    "AddPrefix",
    "AddSuffix",
    "CaseConvert",
    "Template",
    "RenameRule",
    "Counters",
    "TransformContext",
    # Pipeline
    "apply",
    "apply_rule",
    "propose_target",
    # Batch processing
    "validate_options",
    "rename_transformed_file",
    "rename_files",
    "rename_directory",
]
