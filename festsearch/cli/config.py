"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

from festsearch.core.strings import normalize
from festsearch.search.shortlist import TopicPreset


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "festsearch" / "config.yaml")

        # Project config
        paths.append(Path(".festsearch.yaml"))
        paths.append(Path("festsearch.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    Args:
        path: Explicit config file; replaces the default search paths

    Returns:
        Merged configuration, environment variables taking precedence
    """
    config: dict[str, Any] = {}

    if path is not None:
        config = Config.from_file(path)
    else:
        # Last one wins for conflicting keys
        for default_path in Config.get_config_paths():
            if default_path.exists():
                config = Config.merge_configs(
                    config, Config.from_file(default_path)
                )

    env_overrides: dict[str, Any] = {}
    if feed := os.environ.get("FESTSEARCH_FEED"):
        env_overrides["feed"] = feed
    if ttl := os.environ.get("FESTSEARCH_CACHE_TTL"):
        try:
            env_overrides["cache_ttl"] = float(ttl)
        except ValueError:
            raise ValueError(f"FESTSEARCH_CACHE_TTL must be a number, got {ttl!r}")

    return Config.merge_configs(config, env_overrides)


def topic_presets(config: dict[str, Any]) -> dict[str, TopicPreset]:
    """Build shortlist presets from the ``topics`` section.

    Raises:
        QueryError: If a topic definition is invalid
    """
    presets = {}
    for slug, data in (config.get("topics") or {}).items():
        slug = normalize(slug)
        presets[slug] = TopicPreset.from_dict(slug, data or {})
    return presets


def get_setting(config: dict[str, Any], section: str, key: str, default: Any) -> Any:
    """Read ``config[section][key]`` with a default."""
    value = (config.get(section) or {}).get(key)
    return default if value is None else value


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
