"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. Settings defaults   -- field defaults in groupie/config/settings.py
  2. config/config.yaml  -- static defaults checked into the repo
  3. .env file           -- local developer overrides (not committed)
  4. Environment vars    -- set at deploy time

Only settings that were actually supplied (env, ``.env`` or constructor)
override the YAML file, so a value such as ``upstream.base_url`` in
config.yaml takes effect unless ``API_BASE_URL`` is set.  The upstream
resource paths live only in the YAML file.
"""

from pathlib import Path

import yaml

from groupie.config.settings import Settings

_DEFAULT_PATHS = {
    "artists": "/artists",
    "locations": "/locations",
    "dates": "/dates",
    "relation": "/relation",
}

# Settings field -> (config section, key)
_SETTINGS_KEYS = {
    "app_host": ("app", "host"),
    "app_port": ("app", "port"),
    "app_env": ("app", "env"),
    "api_base_url": ("upstream", "base_url"),
    "log_level": ("logging", "level"),
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file. A missing file is not an
              error; built-in defaults are used instead.
        settings: Settings instance to take overrides from. A fresh one is
                  read from the environment when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()

    base = _settings_tree(settings, _SETTINGS_KEYS)
    _deep_merge(base, {"upstream": {"paths": dict(_DEFAULT_PATHS)}})
    _deep_merge(base, yaml_config)
    _deep_merge(base, _settings_tree(settings, settings.model_fields_set))
    return base


def _settings_tree(settings: Settings, fields) -> dict:
    """Nest the given Settings fields into their config sections."""
    tree: dict = {}
    for field, (section, key) in _SETTINGS_KEYS.items():
        if field in fields:
            tree.setdefault(section, {})[key] = getattr(settings, field)
    return tree


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
