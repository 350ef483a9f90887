# mdtidy/models.py
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List

from .rules import DEFAULT_REPLACEMENTS

# keys accepted in FormatterConfig.rules, in default pipeline order
RULE_KEYS: List[str] = [
    "heading",
    "inline-math",
    "replacements",
    "enumeration",
    "list-marker",
    "table",
]


class FormatterConfig(BaseModel):
    rules: List[str] = Field(default_factory=lambda: list(RULE_KEYS))
    replacements: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_REPLACEMENTS))
    replacement_name: str = Field("SmartQuotesToAscii", min_length=1)

    @field_validator("rules")
    @classmethod
    def _known_and_unique(cls, v: List[str]) -> List[str]:
        unknown = [k for k in v if k not in RULE_KEYS]
        if unknown:
            raise ValueError(f"unknown rule(s): {', '.join(unknown)}")
        if len(set(v)) != len(v):
            raise ValueError("duplicate rule keys")
        return v

    @field_validator("replacements")
    @classmethod
    def _no_empty_keys(cls, v: Dict[str, str]) -> Dict[str, str]:
        if "" in v:
            raise ValueError("replacement keys must be non-empty")
        return v
