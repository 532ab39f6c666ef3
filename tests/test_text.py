import re

import pytest

from todo_scanner.rules import RuleSet, compile_rules
from todo_scanner.rules.text import MalformedCommentError, classify
from todo_scanner.status import Status

RULES = compile_rules(
    prefixes=[r"^TODO", r"^BUG"],
    disallowed_prefixes=[r"^DONT-CHECK-IN"],
    suffixes=[r"^ \([^)]+, [0-9]{4}-[0-9]{2}-[0-9]{2}\): ."],
)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\t",
        "// Do something",
        "/* Do something */",
        "// SOME-VERY-WEIRD-TAG: do something",
        "// UNHANDLED: do something",
        "TODO (mristin, 2020-07-20): not a comment",
        "//",
        "/**/",
    ],
)
def test_no_matched_prefix(text):
    assert classify(text, RULES) is None


@pytest.mark.parametrize(
    "text, prefix, suffix",
    [
        ("// TODO (mristin, 2020-07-20): Do something", "TODO", " (mristin, 2020-07-20): Do something"),
        ("/* TODO (mristin, 2020-07-20): Do something */", "TODO", " (mristin, 2020-07-20): Do something"),
        (
            "/* \nTODO (mristin, 2020-07-20): Do something\n\nThis is a body.\n*/",
            "TODO",
            " (mristin, 2020-07-20): Do something\n\nThis is a body.",
        ),
        (
            "// BUG (mristin, 2020-07-20): Something doesn't work.",
            "BUG",
            " (mristin, 2020-07-20): Something doesn't work.",
        ),
        ("  \t// TODO (mristin, 2020-07-20): Padded  \r", "TODO", " (mristin, 2020-07-20): Padded"),
    ],
)
def test_ok(text, prefix, suffix):
    result = classify(text, RULES)

    assert result is not None
    assert result.status is Status.OK
    assert result.prefix == prefix
    assert result.suffix == suffix


@pytest.mark.parametrize(
    "text, prefix, suffix",
    [
        ("// DONT-CHECK-IN", "DONT-CHECK-IN", ""),
        ("// DONT-CHECK-IN: do something", "DONT-CHECK-IN", ": do something"),
        ("// DONT-CHECK-IN (mristin, 2020-07-20): do something", "DONT-CHECK-IN", " (mristin, 2020-07-20): do something"),
    ],
)
def test_disallowed_prefix(text, prefix, suffix):
    result = classify(text, RULES)

    assert result is not None
    assert result.status is Status.DISALLOWED_PREFIX
    assert result.prefix == prefix
    assert result.suffix == suffix


@pytest.mark.parametrize(
    "text, prefix, suffix",
    [
        ("// TODO", "TODO", ""),
        ("// TODO: Do something", "TODO", ": Do something"),
        ("/* TODO (mristin): Do something */", "TODO", " (mristin): Do something"),
    ],
)
def test_non_matching_suffix(text, prefix, suffix):
    result = classify(text, RULES)

    assert result is not None
    assert result.status is Status.NON_MATCHING_SUFFIX
    assert result.prefix == prefix
    assert result.suffix == suffix


def test_first_prefix_pattern_wins():
    rules = RuleSet(
        prefixes=(re.compile(r"^TODO\(\w+\)"), re.compile(r"^TODO")),
        suffixes=(re.compile(r"^: ."),),
    )

    result = classify("// TODO(mristin): Do something", rules)

    assert result is not None
    assert result.prefix == "TODO(mristin)"
    assert result.suffix == ": Do something"
    assert result.status is Status.OK


def test_first_disallowed_prefix_pattern_wins():
    rules = RuleSet(
        disallowed_prefixes=(re.compile(r"^DONT"), re.compile(r"^DONT-CHECK-IN")),
    )

    result = classify("// DONT-CHECK-IN: remove", rules)

    assert result is not None
    assert result.prefix == "DONT"
    assert result.suffix == "-CHECK-IN: remove"
    assert result.status is Status.DISALLOWED_PREFIX


def test_allowed_prefix_is_not_checked_against_disallowed_prefixes():
    rules = RuleSet(
        prefixes=(re.compile(r"^TODO"),),
        disallowed_prefixes=(re.compile(r"^TODO"),),
        suffixes=(),
    )

    result = classify("// TODO (mristin, 2020-07-20): Do something", rules)

    assert result is not None
    assert result.status is Status.NON_MATCHING_SUFFIX


def test_empty_rules_never_match():
    assert classify("// TODO (mristin, 2020-07-20): Do something", RuleSet()) is None


def test_unanchored_pattern_splits_after_the_match():
    rules = RuleSet(disallowed_prefixes=(re.compile("CCC"),))

    result = classify("// AAA CCC rest", rules)

    assert result is not None
    assert result.prefix == "CCC"
    assert result.suffix == " rest"
    assert result.status is Status.DISALLOWED_PREFIX


def test_case_insensitive_rules():
    rules = compile_rules(case_insensitive=True)

    result = classify("// todo (mristin, 2020-07-20): Do something", rules)

    assert result is not None
    assert result.prefix == "todo"
    assert result.status is Status.OK


def test_default_rules_disallow_lower_case_tags():
    result = classify("// todo (mristin, 2020-07-20): Do something", compile_rules())

    assert result is not None
    assert result.prefix == "todo"
    assert result.status is Status.DISALLOWED_PREFIX


@pytest.mark.parametrize("text", ["/* TODO: unterminated", "/*", "/*/"])
def test_malformed_block_comment(text):
    with pytest.raises(MalformedCommentError) as excinfo:
        classify(text, RULES)

    assert excinfo.value.text == text
