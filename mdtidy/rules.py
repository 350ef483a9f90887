"""
rules.py – the rewrite rules applied by the formatter.

Every rule takes the *whole* document and returns the whole document.
Rules hold no per-call state; compiled patterns are shared read-only.

    from mdtidy.rules import BlankLineAfterHeading
    BlankLineAfterHeading().apply("# H\\nText")   # -> "# H\\n\\nText"
"""

from __future__ import annotations

import re
from typing import Dict, List, Mapping

from .lines import (
    ENUM_ITEM_RE,
    LIST_ITEM_RE,
    is_atx_heading,
    is_blank,
    is_enumerated_item,
    is_list_item,
    is_table_separator,
    join_lines,
    split_lines,
)

__all__ = [
    "Rule",
    "BlankLineAfterHeading",
    "InlineMathToDollar",
    "ReplacementRule",
    "BlankLineBeforeTable",
    "EnumerationSpacing",
    "ListMarkerSpacing",
    "DEFAULT_REPLACEMENTS",
]

# „ (U+201E) and “ (U+201C) -> ASCII double quote
DEFAULT_REPLACEMENTS: Dict[str, str] = {
    "„": '"',
    "“": '"',
}


# ══════════════════════════════════════════════════════════════════════
class Rule:
    """Base class: a named transformation over the full document text."""

    name: str = "Rule"

    def apply(self, text: str) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


# ── 1. blank line after ATX headings ----------------------------------
class BlankLineAfterHeading(Rule):
    name = "BlankLineAfterHeading"

    def apply(self, text: str) -> str:
        lines = split_lines(text)
        out: List[str] = []
        for i, line in enumerate(lines):
            out.append(line)
            if not is_atx_heading(line):
                continue
            # last line, or glued to the next paragraph
            if i + 1 == len(lines) or not is_blank(lines[i + 1]):
                out.append("")
        return join_lines(out)


# ── 2. \( ... \) -> $...$ ----------------------------------------------
class InlineMathToDollar(Rule):
    name = "InlineMathToDollar"

    # content stays on one line; the inner trim takes any whitespace and at
    # most one line break per side, and never a blank line (lookahead)
    PATTERN = re.compile(
        r"\\\("
        r"(?![^\S\n]*\n[^\S\n]*\n)"
        r"[^\S\n]*\n?[^\S\n]*(.*?)[^\S\n]*\n?[^\S\n]*"
        r"\\\)"
    )

    def apply(self, text: str) -> str:
        return self.PATTERN.sub(lambda m: f"${m.group(1)}$", text)


# ── 3. literal replacements --------------------------------------------
class ReplacementRule(Rule):
    """
    Replace every occurrence of each key with its value.

    One whole-document pass per pair, in mapping order, so a later pair
    sees the output of an earlier one.
    """

    def __init__(self, name: str, replacements: Mapping[str, str]) -> None:
        if any(old == "" for old in replacements):
            raise ValueError(f"{name}: cannot replace the empty string")
        self.name = name
        self._pairs = tuple(replacements.items())

    @property
    def replacements(self) -> Dict[str, str]:
        return dict(self._pairs)

    def apply(self, text: str) -> str:
        for old, new in self._pairs:
            text = text.replace(old, new)
        return text


# ── 4. blank line before tables ----------------------------------------
class BlankLineBeforeTable(Rule):
    """
    Make sure the header row above every table separator is preceded by a
    blank line (or a blank first line when the table opens the document).
    """

    name = "BlankLineBeforeTable"

    def apply(self, text: str) -> str:
        out: List[str] = []
        for line in split_lines(text):
            if is_table_separator(line):
                self._open_gap(out)
            out.append(line)
        return join_lines(out)

    @staticmethod
    def _open_gap(out: List[str]) -> None:
        if not out:
            out.append("")                     # separator opens the document
            return
        header = out[-1]
        if is_blank(header) or is_table_separator(header):
            return
        if len(out) == 1:
            out.insert(0, "")                  # header is the first line
        elif not is_blank(out[-2]):
            out.insert(len(out) - 1, "")


# ── 5. "1.   item" -> "1. item" ----------------------------------------
class EnumerationSpacing(Rule):
    name = "EnumerationSpacing"

    def apply(self, text: str) -> str:
        return join_lines([
            self._collapse(line) if is_enumerated_item(line) else line
            for line in split_lines(text)
        ])

    @staticmethod
    def _collapse(line: str) -> str:
        number, gap, rest = ENUM_ITEM_RE.fullmatch(line).groups()
        if len(gap) < 2:
            return line
        return f"{number} {rest}"


# ── 6. "*   item" / "-   item" -> "- item" -----------------------------
class ListMarkerSpacing(Rule):
    name = "ListMarkerSpacing"

    def apply(self, text: str) -> str:
        return join_lines([
            self._normalise(line) if is_list_item(line) else line
            for line in split_lines(text)
        ])

    @staticmethod
    def _normalise(line: str) -> str:
        indent, rest = LIST_ITEM_RE.fullmatch(line).groups()
        return f"{indent}- {rest}"
