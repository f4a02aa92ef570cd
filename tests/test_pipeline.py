"""Tests for the transformation pipeline, its stages and the custom transforms."""

import random
import re
from datetime import datetime

import pytest

from renamer.transform import (
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
    apply,
    apply_rule,
)
from renamer.utils import ValidationError

NOW = datetime(2025, 12, 1, 8, 30, 5)


def run(name, *stages, source=None, counters=None, new_name=None, rng=None):
    ctx = TransformContext(
        source_path=source if source is not None else name,
        counters=counters if counters is not None else Counters(),
        now=NOW,
        rng=rng or random.Random(7),
    )
    return apply_rule(name, RenameRule(stages=tuple(stages), new_name=new_name), ctx)


# ---------- Stage order ----------

def test_stages_run_in_fixed_order_regardless_of_input_order():
    result = run("test_file.txt", AddSuffix("_v2"), AddPrefix("NEW_"), Replace("_", "-"))
    assert result == "NEW_test-file_v2.txt"


def test_empty_rule_is_identity():
    assert apply("same.txt", RenameRule(), "same.txt") == "same.txt"


def test_case_runs_after_prefix():
    assert run("file.txt", CaseConvert("upper"), AddPrefix("new_")) == "NEW_FILE.TXT"


# ---------- Replace / Regex ----------

def test_replace_is_literal_and_global():
    assert run("a.b.c.txt", Replace(".", "_")) == "a_b_c_txt"


def test_regex_backreference():
    assert run("IMG_001.jpg", RegexReplace(r"IMG_(\d+)", r"vacation_\1")) == "vacation_001.jpg"


def test_regex_swaps_groups():
    assert run("foo-bar.txt", RegexReplace(r"(\w+)-(\w+)", r"\2-\1")) == "bar-foo.txt"


def test_regex_replaces_all_matches():
    assert run("aaa.txt", RegexReplace("a", "b")) == "bbb.txt"


def test_regex_other_escapes_are_literal():
    assert run("a.txt", RegexReplace("a", r"\d")) == r"\d.txt"


@pytest.mark.parametrize("pattern", ["(.*)", "^(.*)$"])
def test_regex_whole_name_matches_once(pattern):
    assert run("a.txt", RegexReplace(pattern, r"pre_\1")) == "pre_a.txt"


def test_regex_empty_matches_between_characters():
    assert run("ab", RegexReplace("x*", "-")) == "-a-b-"


def test_invalid_regex_leaves_name_unchanged():
    assert run("photo.jpg", RegexReplace("(", "x")) == "photo.jpg"


def test_bad_group_reference_leaves_name_unchanged():
    assert run("photo.jpg", RegexReplace("(o)", r"\3")) == "photo.jpg"


def test_failing_stage_does_not_stop_later_stages():
    assert run("photo.jpg", RegexReplace("(", "x"), AddPrefix("p_")) == "p_photo.jpg"


# ---------- Prefix / Suffix / Case ----------

def test_suffix_without_extension():
    assert run("README", AddSuffix("_v2")) == "README_v2"


def test_suffix_goes_before_last_extension():
    assert run("a.tar.gz", AddSuffix("_v2")) == "a.tar_v2.gz"


def test_case_modes():
    assert run("My File.txt", CaseConvert("upper")) == "MY FILE.TXT"
    assert run("My File.TXT", CaseConvert("lower")) == "my file.txt"
    assert run("my great file.txt", CaseConvert("title")) == "My Great File.txt"


def test_unknown_case_mode_rejected():
    with pytest.raises(ValidationError):
        CaseConvert("sideways")


# ---------- Custom transforms ----------

def test_custom_date_and_datetime():
    assert run("report.txt", CustomTransform("date")) == "report_20251201.txt"
    assert run("report.txt", CustomTransform("datetime")) == "report_20251201_083005.txt"


def test_custom_counter_advances_per_call():
    counters = Counters()
    assert run("a.txt", CustomTransform("counter"), counters=counters) == "a_001.txt"
    assert run("b.txt", CustomTransform("counter"), counters=counters) == "b_002.txt"


def test_custom_random_token():
    assert re.fullmatch(r"report_[0-9a-z]{4}\.txt", run("report.txt", CustomTransform("random")))


def test_custom_random_is_reproducible_with_seeded_rng():
    first = run("r.txt", CustomTransform("random"), rng=random.Random(42))
    second = run("r.txt", CustomTransform("random"), rng=random.Random(42))
    assert first == second


def test_custom_hash_uses_file_content(tmp_path):
    source = tmp_path / "hello.txt"
    source.write_bytes(b"hello")
    assert run("hello.txt", CustomTransform("hash"), source=source) == "hello_5d41402a.txt"


def test_custom_hash_placeholder_when_unreadable(tmp_path):
    assert run("gone.txt", CustomTransform("hash"), source=tmp_path / "gone.txt") == "gone_hash.txt"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Meeting December 1, 2025.pdf", "Meeting 251201.pdf"),
        ("notes march 15, 2024 final.txt", "notes 240315 final.txt"),
        ("notes.txt", "notes.txt"),
        ("Smarch 1, 2025.txt", "Smarch 1, 2025.txt"),
    ],
)
def test_custom_parsedate(name, expected):
    assert run(name, CustomTransform("parsedate")) == expected


def test_unknown_custom_transform_is_identity():
    assert run("file.txt", CustomTransform("rot13")) == "file.txt"


# ---------- Template / explicit name ----------

def test_template_overrides_previous_stages(tmp_path):
    source = tmp_path / "a-b.txt"
    rule_stages = (Replace("-", "+"), Template("{basename}_X.{extension}"))
    assert run("a-b.txt", *rule_stages, source=source) == "a-b_X.txt"


def test_template_placeholders(tmp_path):
    source = tmp_path / "photos" / "IMG_1.jpg"
    template = Template("{dirname}_{counter}_{basename}_{date}.{extension}")
    counters = Counters()
    assert run("IMG_1.jpg", template, source=source, counters=counters) == "photos_001_IMG_1_20251201.jpg"
    assert run("IMG_1.jpg", template, source=source, counters=counters) == "photos_002_IMG_1_20251201.jpg"


def test_template_unknown_placeholder_kept(tmp_path):
    assert run("a.txt", Template("{nope}-{basename}"), source=tmp_path / "a.txt") == "{nope}-a"


def test_template_and_custom_counters_are_independent(tmp_path):
    counters = Counters()
    stages = (CustomTransform("counter"), Template("{counter}_{basename}.{extension}"))
    assert run("a.txt", *stages, source=tmp_path / "a.txt", counters=counters) == "001_a.txt"
    # the overridden custom stage still advanced its own counter
    assert counters.custom == 1
    assert counters.template == 1


def test_new_name_replaces_stages():
    assert run("old.txt", AddPrefix("x_"), new_name="fixed.txt") == "fixed.txt"


def test_template_wins_over_new_name(tmp_path):
    result = run("old.txt", Template("{basename}_T.{extension}"), source=tmp_path / "old.txt", new_name="fixed.txt")
    assert result == "old_T.txt"
