# tests/test_formatter.py
import pytest

from mdtidy.formatter import (
    Formatter,
    RuleError,
    build_formatter,
    default_formatter,
    format_text,
)
from mdtidy.models import FormatterConfig
from mdtidy.rules import Rule

SAMPLE = (
    "# Title\n"
    "Intro with \\(  a^2 + b^2  \\) and „quotes“.\n"
    "| Col | Val |\n"
    "| --- | --: |\n"
    "| x | 1 |\n"
    "## Steps\n"
    "1.   first\n"
    "2.  second\n"
    "*   bullet\n"
    "-  dash"
)

EXPECTED = (
    "# Title\n"
    "\n"
    "Intro with $a^2 + b^2$ and \"quotes\".\n"
    "\n"
    "| Col | Val |\n"
    "| --- | --: |\n"
    "| x | 1 |\n"
    "## Steps\n"
    "\n"
    "1. first\n"
    "2. second\n"
    "- bullet\n"
    "- dash\n"
)


class Recorder(Rule):
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def apply(self, text):
        self.calls.append(self.name)
        return text + self.name


class Boom(Rule):
    name = "Boom"

    def apply(self, text):
        raise ValueError("bad input")


def test_default_pipeline_order():
    assert default_formatter().names == [
        "BlankLineAfterHeading",
        "InlineMathToDollar",
        "SmartQuotesToAscii",
        "EnumerationSpacing",
        "ListMarkerSpacing",
        "BlankLineBeforeTable",
    ]


def test_format_text_full_document():
    assert format_text(SAMPLE) == EXPECTED


@pytest.mark.parametrize(
    "doc",
    [
        SAMPLE,
        "# H",
        "| A |\n|--|",
        "|--|",
        "# A | B\n|--|--|\n",
        "text\n# H\n| A |\n|--|\n* a\n1.  b\n",
        "\\(\n x \\) „“\n\n\n",
        "a\nb\n* | -\n",
        "# A \\(\n\\) tail\nText",
        "\\(\r\n x\r\n\\)\r\n",
        "",
    ],
)
def test_pipeline_is_idempotent(doc):
    once = format_text(doc)
    assert format_text(once) == once


def test_heading_at_eof_gets_single_newline():
    assert format_text("# H") == "# H\n"


def test_empty_document():
    assert format_text("") == "\n"


def test_format_keeps_crlf():
    assert default_formatter().format("a\r\nb\r\n") == "a\r\nb\r\n"


def test_formatter_does_not_add_trailing_newline():
    assert Formatter([]).format("abc") == "abc"
    assert format_text("abc", Formatter([])) == "abc\n"


def test_rules_run_in_order():
    calls = []
    fmt = Formatter([Recorder("A", calls), Recorder("B", calls), Recorder("C", calls)])
    assert fmt.format("") == "ABC"
    assert calls == ["A", "B", "C"]


def test_failure_short_circuits():
    calls = []
    fmt = Formatter([Recorder("A", calls), Boom(), Recorder("C", calls)])
    with pytest.raises(RuleError) as exc:
        fmt.format("doc")
    assert calls == ["A"]
    assert exc.value.rule_name == "Boom"
    assert isinstance(exc.value.cause, ValueError)
    assert exc.value.__cause__ is exc.value.cause
    assert str(exc.value) == "rule 'Boom' failed: bad input"


def test_formatter_is_reusable():
    fmt = default_formatter()
    assert fmt.format("# A\nx") == fmt.format("# A\nx") == "# A\n\nx"


def test_build_formatter_subset_and_custom_replacements():
    cfg = FormatterConfig(
        rules=["list-marker", "replacements"],
        replacements={"”": "'"},
        replacement_name="RightQuote",
    )
    fmt = build_formatter(cfg)
    assert fmt.names == ["ListMarkerSpacing", "RightQuote"]
    assert fmt.format("# H\n*  a”") == "# H\n- a'"


def test_list_marker_rewrite_feeds_table_rule():
    assert format_text("a\nb\n* | -") == "a\n\nb\n- | -\n"


def test_inline_math_keeps_gap_after_heading():
    assert format_text("# A \\(\n\\) tail\nText") == "# A \\(\n\n\\) tail\nText\n"
