from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default config/validate.yml)
- Validate it against the JSON schema shipped next to this module
- Apply defaults (encoding=utf-8) and environment overrides (PAN_INPUT_PATH)
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/validate.yml")

CONFIG_PATH_ENV = "PAN_VALIDATION_CONFIG"
INPUT_PATH_ENV = "PAN_INPUT_PATH"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ValidationConfig:
    input_path: str
    column: str | None = None  # None -> first column
    encoding: str = "utf-8"
    output_directory: str | None = None  # None -> no file output
    keep_na_strings: tuple[str, ...] = ()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or if
            the config data fails schema validation (missing required keys,
            wrong types, unknown keys).
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


def resolve_config_path(cli_path: str | None = None) -> Path:
    """Pick the config file: --config, then $PAN_VALIDATION_CONFIG, then the default."""
    if cli_path:
        return Path(cli_path)
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> ValidationConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    input_path = os.getenv(INPUT_PATH_ENV) or data["input_path"]
    return ValidationConfig(
        input_path=input_path,
        column=data.get("column"),
        encoding=data.get("encoding", "utf-8"),
        output_directory=data.get("output_directory"),
        keep_na_strings=tuple(data.get("keep_na_strings") or ()),
    )
