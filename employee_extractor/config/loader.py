from __future__ import annotations

import codecs
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ExtractorSettings, HeaderSynonyms

"""Config loader.

Responsibilities:
- Load YAML (config/extract.yml by default)
- Validate against config_schema.json (additionalProperties: false)
- Apply defaults for every optional key
- Reject encodings Python does not know
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "ExtractConfig",
    "load_config",
    "settings_from_mapping",
]

DEFAULT_CONFIG_PATH = Path("config/extract.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ExtractConfig:
    source_directory: str
    settings: ExtractorSettings = field(default_factory=ExtractorSettings)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation
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


def _check_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {name}") from e
    return name


def settings_from_mapping(data: dict[str, Any]) -> ExtractorSettings:
    """Build ExtractorSettings from an already validated config mapping."""
    defaults = ExtractorSettings()
    syn_raw = data.get("header_synonyms") or {}
    base = defaults.synonyms
    synonyms = HeaderSynonyms(
        code=tuple(syn_raw.get("code", base.code)),
        name=tuple(syn_raw.get("name", base.name)),
        department=tuple(syn_raw.get("department", base.department)),
        role=tuple(syn_raw.get("role", base.role)),
    )
    sentinels = data.get("sentinels") or {}
    return ExtractorSettings(
        synonyms=synonyms,
        department_sentinel=sentinels.get("department", defaults.department_sentinel),
        role_sentinel=sentinels.get("role", defaults.role_sentinel),
        field_label_template=sentinels.get("field_label", defaults.field_label_template),
        header_scan_limit=data.get("header_scan_limit", defaults.header_scan_limit),
        min_header_matches=data.get("min_header_matches", defaults.min_header_matches),
        csv_encoding=_check_encoding(data.get("csv_encoding", defaults.csv_encoding)),
        default_encoding=_check_encoding(data.get("default_encoding", defaults.default_encoding)),
    )


def load_config(path: Path) -> ExtractConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return ExtractConfig(
        source_directory=data["source_directory"],
        settings=settings_from_mapping(data),
    )
