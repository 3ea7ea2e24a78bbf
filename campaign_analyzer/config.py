"""Configuration helpers for the campaign analyzer."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import yaml

from .ingestion.headers import CAMPAIGN_COLUMNS, LEAD_COLUMNS, ColumnKeywords, normalize_header
from .ingestion.loaders import SKIP_NAME_KEYWORDS

LOGGER = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be parsed: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping at the top level")
    return data


@dataclass(frozen=True, slots=True)
class IngestionSettings:
    """Keyword tables and row filters used when decoding exports."""

    campaign_columns: ColumnKeywords = CAMPAIGN_COLUMNS
    lead_columns: ColumnKeywords = LEAD_COLUMNS
    skip_name_keywords: Tuple[str, ...] = tuple(SKIP_NAME_KEYWORDS)


def settings_from_config(config: Optional[Mapping[str, Any]]) -> IngestionSettings:
    """Build :class:`IngestionSettings` from a loaded configuration mapping.

    Example YAML::

        columns:
          campaign:
            spend: ["investimento", "valor usado"]
          lead:
            phone_number: ["whatsapp", "telefone"]
        skip_name_keywords: ["total", "results", "subtotal"]
    """

    config = config or {}
    columns = config.get("columns") or {}
    if not isinstance(columns, Mapping):
        raise ConfigurationError("'columns' must be a mapping of table name to field keywords")

    campaign_columns = _merge_keywords(CAMPAIGN_COLUMNS, columns.get("campaign"), table="campaign")
    lead_columns = _merge_keywords(LEAD_COLUMNS, columns.get("lead"), table="lead")

    skip_keywords = config.get("skip_name_keywords")
    if skip_keywords is None:
        skip = tuple(SKIP_NAME_KEYWORDS)
    else:
        skip = tuple(str(keyword).strip().lower() for keyword in _as_sequence(skip_keywords, "skip_name_keywords"))
        skip = tuple(keyword for keyword in skip if keyword)

    return IngestionSettings(
        campaign_columns=campaign_columns,
        lead_columns=lead_columns,
        skip_name_keywords=skip,
    )


def _merge_keywords(
    defaults: ColumnKeywords,
    overrides: Optional[Mapping[str, Any]],
    *,
    table: str,
) -> ColumnKeywords:
    if not overrides:
        return defaults
    if not isinstance(overrides, Mapping):
        raise ConfigurationError(f"'columns.{table}' must be a mapping of field name to keywords")

    known = {field for field, _ in defaults}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown {table} field(s) {unknown}. Known fields: {sorted(known)}"
        )

    merged = []
    for field, keywords in defaults:
        if field in overrides:
            values = _as_sequence(overrides[field], f"columns.{table}.{field}")
            keywords = tuple(k for k in (normalize_header(str(value)) for value in values) if k)
            LOGGER.debug("Using custom %s keywords for %s: %s", table, field, keywords)
        merged.append((field, keywords))
    return tuple(merged)


def _as_sequence(value: Any, name: str) -> Sequence[Any]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return value
    raise ConfigurationError(f"'{name}' must be a string or a list of strings")


__all__ = [
    "ConfigurationError",
    "IngestionSettings",
    "load_configuration",
    "settings_from_config",
]
