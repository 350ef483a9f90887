"""
Schema-validation helpers for mdtidy configuration files.

Usage:
    from mdtidy.validate import load_config
    cfg = load_config(Path("mdtidy.json"))   # raises ConfigError on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from pydantic import ValidationError

from .models import FormatterConfig

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"


class ConfigError(Exception):
    """Configuration file is unreadable, not JSON, or fails validation."""


# ─── internal helper ─────────────────────────────────────────────────────
def _load_schema(name: str) -> Dict[str, Any]:
    return json.loads((SCHEMA_DIR / name).read_text(encoding="utf-8"))


_config_schema = _load_schema("config.schema.json")


# ─── public API ──────────────────────────────────────────────────────────
def validate_config(data: Any) -> FormatterConfig:
    """
    Check *data* (already decoded JSON) against the schema, then build the
    model.  Unset keys fall back to the defaults.
    """
    try:
        jsonschema.validate(data, _config_schema)
        return FormatterConfig.model_validate(data)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.path) or "<root>"
        raise ConfigError(f"{where}: {e.message}") from e
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def load_config(path: Path) -> FormatterConfig:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not UTF-8: {e}") from e
    return validate_config(data)
