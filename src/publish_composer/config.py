"""Configuration loading and defaults."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .platforms import PLATFORM_NAMES

DEFAULT_SETTINGS: Dict[str, Any] = {
    "platforms": {
        "names": list(PLATFORM_NAMES),
    },
    "media_limits": {
        "x_max_media": 4,
        "bluesky_max_media": 4,
    },
    "media_proxy": {
        "base_url": "https://app.succulent.social",
        "identifiers": ["lunary.app/api/og/"],
        "format": "png",
        "platform_formats": {
            "tiktok": "jpg",
        },
    },
    # platform -> option field -> env vars tried in order
    "env_defaults": {
        "pinterest": {
            "boardName": ["PINTEREST_BOARD_NAME", "PINTEREST_BOARD_ID"],
        },
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(settings_path: str = "config/settings.yaml") -> Dict[str, Any]:
    """Loads settings.yaml and merges it onto defaults."""
    merged = deepcopy(DEFAULT_SETTINGS)
    config_path = Path(settings_path)
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            user_cfg = yaml.safe_load(f) or {}
        merged = _deep_merge(merged, user_cfg)
    return merged


def section(config: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """Returns a settings section, treating a missing or null section as empty."""
    value = config.get(name)
    return value if isinstance(value, dict) else {}


def platform_names(config: Mapping[str, Any]) -> List[str]:
    names = section(config, "platforms").get("names")
    if isinstance(names, list) and names:
        return [str(n) for n in names]
    return list(PLATFORM_NAMES)


def media_proxy_base_url(config: Mapping[str, Any], environ: Mapping[str, str] | None = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    base_url = env.get("MEDIA_PROXY_BASE_URL") or section(config, "media_proxy").get("base_url")
    if not base_url:
        return None
    return str(base_url).rstrip("/")


def env_default_options(
    config: Mapping[str, Any],
    platform: str,
    environ: Mapping[str, str] | None = None,
) -> Optional[Dict[str, Any]]:
    """Builds the environment-sourced option bag for ``platform``, if any.

    Each option field lists env vars in preference order; the first non-empty
    one wins. Returns None when no field could be filled.
    """
    env = os.environ if environ is None else environ
    fields = section(config, "env_defaults").get(platform) or {}
    options: Dict[str, Any] = {}
    for option_name, env_names in fields.items():
        if isinstance(env_names, str):
            env_names = [env_names]
        for env_name in env_names:
            value = env.get(env_name)
            if value:
                options[option_name] = value
                break
    return options or None
