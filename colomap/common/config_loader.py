"""Configuration loading and validation."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from colomap.common.constants import CONFIG_FILENAME, DEFAULT_CONFIG
from colomap.common.errors import ConfigError
from colomap.common.fs import read_yaml
from colomap.common.schema import validate_config


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_overlay(path: Path) -> dict:
    try:
        overlay = read_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    if overlay is None:
        return {}
    if not isinstance(overlay, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return overlay


def load_config(
    config_dir: Path | None,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> dict:
    cfg: dict = copy.deepcopy(DEFAULT_CONFIG)
    for directory in (config_dir, overlay_config_dir):
        if directory is None:
            continue
        path = directory / CONFIG_FILENAME
        if not path.exists():
            continue
        cfg = _deep_merge(cfg, _read_overlay(path))
    return validate_config(cfg, allow_unknown=allow_unknown)
