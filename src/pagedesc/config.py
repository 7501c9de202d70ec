# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Configuration: optional YAML file plus PAGEDESC_* environment overrides.

    enable_meta_description_functions: false   # register the override directive
    log_level: INFO
    log_json: false

Env vars win over the file: PAGEDESC_ENABLE_FUNCTIONS, PAGEDESC_LOG_LEVEL,
PAGEDESC_LOG_JSON.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")

_ENV_OVERRIDES: dict[str, str] = {
    "PAGEDESC_ENABLE_FUNCTIONS": "enable_meta_description_functions",
    "PAGEDESC_LOG_LEVEL": "log_level",
    "PAGEDESC_LOG_JSON": "log_json",
}
_BOOL_FIELDS = {"enable_meta_description_functions", "log_json"}


class DescriptionConfig(BaseModel):
    """Settings consumed by the host integration layer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enable_meta_description_functions: bool = Field(
        False, description="Register the explicit description override directive"
    )
    log_level: str = Field("INFO", description="Root logger level")
    log_json: bool = Field(False, description="JSON log lines instead of console output")


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", source=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in config file: {e}", source=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping, got {type(data).__name__}",
            source=str(path),
        )
    return data


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> DescriptionConfig:
    """Build a DescriptionConfig from *path* (optional) and environment overrides."""
    env = os.environ if environ is None else environ
    values: dict = _read_yaml(Path(path)) if path else {}

    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = env.get(env_name, "").strip()
        if not raw:
            continue
        values[field_name] = raw.lower() in _TRUTHY if field_name in _BOOL_FIELDS else raw
        logger.debug("Config override from %s", env_name)

    try:
        return DescriptionConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", source=str(path or "environment")) from e
