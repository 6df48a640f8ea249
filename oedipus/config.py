"""Configuration loading for oedipus (.oedipus.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import OedipusError
from .naming import COLLISION_POLICIES
from .rendering.constants import DEFAULT_MAXDEPTH, DEFAULT_SUBDIR

CONFIG_FILENAME = ".oedipus.yml"


class ConfigError(OedipusError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OedipusConfig:
    """Represents the settings defined in .oedipus.yml."""

    root: Path
    output: Optional[Path] = None
    description: Optional[str] = None
    subdir: str = DEFAULT_SUBDIR
    maxdepth: int = DEFAULT_MAXDEPTH
    provider: str = "manifest"
    search_paths: List[Path] = field(default_factory=list)
    collisions: str = "error"
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> OedipusConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return OedipusConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = OedipusConfig(root=root)

    output = _as_str(data.get("output"))
    if output:
        config.output = root / output
    config.description = _as_str(data.get("description"))

    subdir = _as_str(data.get("subdir"))
    if subdir:
        if "/" in subdir or "\\" in subdir:
            raise ConfigError("subdir must be a single directory name")
        config.subdir = subdir

    maxdepth = _as_int(data.get("maxdepth"))
    if maxdepth is not None:
        if maxdepth < 1:
            raise ConfigError("maxdepth must be a positive integer")
        config.maxdepth = maxdepth

    provider = _as_str(data.get("provider"))
    if provider:
        config.provider = provider

    config.search_paths = [root / path for path in _as_str_list(data.get("search_paths"))]

    collisions = _as_str(data.get("collisions"))
    if collisions:
        collisions = collisions.lower()
        if collisions not in COLLISION_POLICIES:
            choices = ", ".join(COLLISION_POLICIES)
            raise ConfigError(f"collisions must be one of: {choices}")
        config.collisions = collisions

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "OedipusConfig", "load_config"]
