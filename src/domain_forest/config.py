"""
Configuration for domain-forest.

Loaded from:
1. Defaults (this file)
2. Config file ($XDG_CONFIG_HOME/domain-forest/config.toml, or --config PATH)
3. Environment variables (DOMAIN_FOREST_*) override the file
4. CLI flags override everything

Example config.toml:

    strategy = "indexed"
    encoding = "utf-8"
    log_level = "INFO"
    strict = false
    tree_depth = 1
"""
from __future__ import annotations

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from domain_forest.forest.forest import STRATEGIES

log = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """All tunable settings in one place."""
    strategy: str = "indexed"  # "indexed" or "linear"
    encoding: str = "utf-8"  # encoding of source files
    log_level: str = "WARNING"
    strict: bool = False  # abort on an unreadable source instead of skipping it
    tree_depth: int = 1  # levels below the top printed by `tree`


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "domain-forest" / "config.toml"
    return Path.home() / ".config" / "domain-forest" / "config.toml"


def load_config(path: Path | None = None) -> Config:
    """Load config from *path* (or the default location) and the environment."""
    config = Config()
    explicit = path is not None
    path = path if explicit else get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            log.warning("Ignoring config file %s: %s", path, exc)
        else:
            _apply(config, data, source=str(path))
    elif explicit:
        log.warning("Config file %s not found, using defaults", path)

    _apply_env(config)
    return config


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def _is_codec(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "strategy": str,
    "encoding": str,
    "log_level": lambda v: str(v).upper(),
    "strict": _to_bool,
    "tree_depth": int,
}


def _apply(config: Config, data: dict[str, Any], source: str) -> None:
    """Apply known keys from *data*; warn about bad values and unknown keys."""
    for key, raw in data.items():
        conv = _CONVERTERS.get(key)
        if conv is None:
            log.warning("%s: unknown setting %r", source, key)
            continue
        try:
            value = conv(raw)
        except (TypeError, ValueError):
            log.warning("%s: bad value %r for %s", source, raw, key)
            continue
        if key == "strategy" and value not in STRATEGIES:
            log.warning("%s: unknown strategy %r", source, value)
            continue
        if key == "log_level" and value not in LOG_LEVELS:
            log.warning("%s: unknown log level %r", source, value)
            continue
        if key == "encoding" and not _is_codec(value):
            log.warning("%s: unknown encoding %r", source, value)
            continue
        setattr(config, key, value)


def _apply_env(config: Config) -> None:
    """Apply environment variable overrides."""
    env_map = {
        "DOMAIN_FOREST_STRATEGY": "strategy",
        "DOMAIN_FOREST_ENCODING": "encoding",
        "DOMAIN_FOREST_LOG_LEVEL": "log_level",
        "DOMAIN_FOREST_STRICT": "strict",
        "DOMAIN_FOREST_TREE_DEPTH": "tree_depth",
    }
    overrides = {
        key: os.environ[env_key]
        for env_key, key in env_map.items()
        if env_key in os.environ
    }
    if overrides:
        _apply(config, overrides, source="environment")
