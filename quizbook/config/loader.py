from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from quizbook.models.config_models import GeneratorConfig

"""Config loader for quizbook-sync.

Responsibilities:
- Load YAML config (default config/quizbook.yml)
- Validate it against the bundled JSON schema (unknown keys rejected)
- Apply defaults for every missing key
- Apply environment overrides (QUIZBOOK_EXCEL / QUIZBOOK_OUT)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_EXCEL",
    "ENV_OUT",
    "apply_env_overrides",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config") / "quizbook.yml"

ENV_EXCEL = "QUIZBOOK_EXCEL"
ENV_OUT = "QUIZBOOK_OUT"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: Schema file missing/invalid, or the data violates it
            (wrong types, unknown keys, ...)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> GeneratorConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = GeneratorConfig()
    sheets = data.get("sheets", {})
    return GeneratorConfig(
        workbook=Path(data.get("workbook", defaults.workbook)),
        output=Path(data.get("output", defaults.output)),
        total_pages=data.get("total_pages", defaults.total_pages),
        answer_key_base=data.get("answer_key_base", defaults.answer_key_base),
        header_rows=data.get("header_rows", defaults.header_rows),
        pages_sheet=sheets.get("pages", defaults.pages_sheet),
        detail_sheet=sheets.get("detail", defaults.detail_sheet),
        default_note_icon=data.get("default_note_icon", defaults.default_note_icon),
        source=path,
    )


def apply_env_overrides(config: GeneratorConfig, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    """Apply QUIZBOOK_EXCEL / QUIZBOOK_OUT (empty values are ignored)."""
    env = os.environ if environ is None else environ
    excel = env.get(ENV_EXCEL)
    out = env.get(ENV_OUT)
    return config.with_overrides(
        workbook=Path(excel) if excel else None,
        output=Path(out) if out else None,
    )
