from __future__ import annotations
# -*- coding: utf-8 -*-

"""
config.py – Settings for a specfmt run.

Layers, lowest precedence first:
  defaults -> .specfmt.yml next to the spec -> SPECFMT_* environment -> CLI flags
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .rewrapper import DEFAULT_COLUMN_LENGTH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".specfmt.yml"

ENV_WRAP = "SPECFMT_WRAP"
ENV_BASE_BRANCH = "SPECFMT_BASE_BRANCH"


class ConfigError(Exception):
    pass


class FormatSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    wrap: int = Field(default=DEFAULT_COLUMN_LENGTH, gt=0)
    full_spec: bool = False
    force: bool = False
    base_branch: Optional[str] = None


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Reads a YAML settings file. A missing file is an empty config.
    """
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    logger.debug(f"Loaded config from {path}: {data}")
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    raw_wrap = environ.get(ENV_WRAP, "")
    if raw_wrap:
        overrides["wrap"] = raw_wrap
    base_branch = environ.get(ENV_BASE_BRANCH, "")
    if base_branch:
        overrides["base_branch"] = base_branch
    return overrides


def load_settings(
    spec_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FormatSettings:
    """
    Merges all layers into one validated FormatSettings.

    cli_overrides entries set to None are treated as "not given".
    """
    if config_path is None and spec_path is not None:
        config_path = spec_path.parent / CONFIG_FILENAME

    merged: Dict[str, Any] = {}
    if config_path is not None:
        merged.update(load_config_file(config_path))
    merged.update(_env_overrides(os.environ if environ is None else environ))
    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    try:
        return FormatSettings(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}")
