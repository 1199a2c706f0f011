"""Gateway: YAML configuration loader -- settings read by the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from code_convert.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('cc.config')


class YamlConfigLoader:
    """Loads raw settings from YAML files with merge and override support."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        return _load_data(config_path, overrides)


def find_default_config() -> Path | None:
    """First existing file among the user-level config paths."""
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return default_path
    return None


def _load_data(
    config_path: str | None = None,
    overrides: dict | None = None,
) -> dict:
    """Resolve, read, and merge YAML config into a plain dict."""
    data: dict = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
        log.debug('Loaded config from %s', path)
    else:
        default_path = find_default_config()
        if default_path is not None:
            data = yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
            log.debug('Loaded config from %s', default_path)
    if not isinstance(data, dict):
        raise ValueError(f'Config must be a mapping, got {type(data).__name__}')
    if overrides:
        deep_merge(data, overrides)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
