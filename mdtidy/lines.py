"""
lines.py – line-oriented view of a document + pure line classifiers.

A document is split on "\\n" only; "\\r" stays part of the line, so
split_lines() / join_lines() round-trip any text exactly.
"""

from __future__ import annotations

import re
from typing import List

__all__ = [
    "split_lines",
    "join_lines",
    "is_blank",
    "is_atx_heading",
    "is_table_separator",
    "is_list_item",
    "is_enumerated_item",
]

HEADING_RE     = re.compile(r"[ \t]*#{1,6}[ \t]")
SEP_CELL_RE    = re.compile(r":?-+:?")
# indent, marker + gap, rest  (matched against a single line)
LIST_ITEM_RE   = re.compile(r"([ \t]*)[-*][ \t]+(.*)")
# indent + numeral + ".", gap, rest
ENUM_ITEM_RE   = re.compile(r"([ \t]*\d+\.)([ \t]+)(.*)")


# ----------------------------------------------------------------------
def split_lines(text: str) -> List[str]:
    return text.split("\n")


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines)


# ----------------------------------------------------------------------
def is_blank(line: str) -> bool:
    return not line.strip()


def is_atx_heading(line: str) -> bool:
    """`#`..`######` (after optional indent) followed by a space or tab."""
    return HEADING_RE.match(line) is not None


def is_table_separator(line: str) -> bool:
    """
    True for the dash row under a table header, e.g. `| :-- | --: |`.

    Empty cells are only allowed at the edges (leading / trailing pipe) and
    at least one dash cell is required, so a lone `|` does not qualify.
    """
    t = line.strip()
    if "|" not in t:
        return False
    cells = [c.strip() for c in t.split("|")]
    last = len(cells) - 1
    dashes = 0
    for i, cell in enumerate(cells):
        if not cell:
            if i in (0, last):
                continue
            return False
        if not SEP_CELL_RE.fullmatch(cell):
            return False
        dashes += 1
    return dashes > 0


def is_list_item(line: str) -> bool:
    return LIST_ITEM_RE.fullmatch(line) is not None


def is_enumerated_item(line: str) -> bool:
    return ENUM_ITEM_RE.fullmatch(line) is not None
