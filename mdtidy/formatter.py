"""
formatter.py — Markdown normaliser pipeline

Usable as a library:

    from mdtidy.formatter import format_text
    clean = format_text(raw)

Rules applied by the default pipeline (in order):

1. Blank line after every ATX heading.
2. `\\( x \\)` inline math -> `$x$`.
3. Low / left double quotes („ “) -> ASCII `"`.
4. `1.   item` -> `1. item`.
5. `*   item` / `-   item` -> `- item`.
6. Blank line before every table header (last, so rows rewritten
   by 5. are classified in their final form).

format_text() also guarantees a single trailing newline at EOF.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .models import FormatterConfig
from .rules import (
    BlankLineAfterHeading,
    BlankLineBeforeTable,
    EnumerationSpacing,
    InlineMathToDollar,
    ListMarkerSpacing,
    ReplacementRule,
    Rule,
)

__all__ = [
    "RuleError",
    "Formatter",
    "RULE_FACTORIES",
    "build_formatter",
    "default_formatter",
    "format_text",
]

logger = logging.getLogger(__name__)


class RuleError(Exception):
    """A rule could not be applied; carries the rule name and the cause."""

    def __init__(self, rule_name: str, cause: BaseException) -> None:
        super().__init__(f"rule {rule_name!r} failed: {cause}")
        self.rule_name = rule_name
        self.cause = cause


# ----------------------------------------------------------------------
class Formatter:
    """Applies a fixed sequence of rules, strictly in order."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def names(self) -> List[str]:
        return [r.name for r in self._rules]

    def format(self, text: str) -> str:
        """
        Run every rule over *text*.

        Raises
        ------
        RuleError
            On the first failing rule; later rules are not run and no
            partially formatted text is returned.
        """
        for rule in self._rules:
            try:
                result = rule.apply(text)
            except Exception as exc:  # noqa: BLE001
                raise RuleError(rule.name, exc) from exc
            logger.debug("%s: %d -> %d chars", rule.name, len(text), len(result))
            text = result
        return text


# ── pipeline construction ---------------------------------------------
RULE_FACTORIES: Dict[str, Callable[[FormatterConfig], Rule]] = {
    "heading":      lambda cfg: BlankLineAfterHeading(),
    "inline-math":  lambda cfg: InlineMathToDollar(),
    "replacements": lambda cfg: ReplacementRule(cfg.replacement_name, cfg.replacements),
    "table":        lambda cfg: BlankLineBeforeTable(),
    "enumeration":  lambda cfg: EnumerationSpacing(),
    "list-marker":  lambda cfg: ListMarkerSpacing(),
}


def build_formatter(config: FormatterConfig) -> Formatter:
    return Formatter(RULE_FACTORIES[key](config) for key in config.rules)


def default_formatter() -> Formatter:
    return build_formatter(FormatterConfig())


# ----------------------------------------------------------------------
def format_text(txt: str, formatter: Optional[Formatter] = None) -> str:
    """
    Return *txt* normalised by *formatter* (default pipeline if omitted),
    with a trailing newline appended when missing.
    """
    fmt = formatter or default_formatter()
    out = fmt.format(txt)
    if not out.endswith("\n"):
        out += "\n"
    return out
