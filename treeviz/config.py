"""Visualizer settings and their JSON/YAML loader."""

from __future__ import annotations

from dataclasses import dataclass, fields
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""


@dataclass(frozen=True)
class VisualizerConfig:
    """Replay cadence and the canvas geometry handed to renderers."""

    tick_interval: float = 1.0
    canvas_width: float = 600.0
    root_y: float = 40.0
    vertical_spacing: float = 60.0
    level_height: float = 80.0
    node_radius: float = 20.0
    # Offset of the root's children as a fraction of canvas_width; halves per level.
    child_spread: float = 0.25
    compact_input: bool = False

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "compact_input":
                if not isinstance(value, bool):
                    raise ConfigError("compact_input must be a boolean")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{item.name} must be numeric, got {value!r}")
            if value < 0:
                raise ConfigError(f"{item.name} must be non-negative")
        if self.child_spread > 0.5:
            raise ConfigError("child_spread must not exceed 0.5")
        if self.canvas_width == 0:
            raise ConfigError("canvas_width must be positive")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "VisualizerConfig":
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(payload))

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


def load_config(path: Optional[Union[str, Path]]) -> VisualizerConfig:
    """Load settings from *path*; ``None`` returns the defaults."""

    if path is None:
        return VisualizerConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    try:
        if config_path.suffix.lower() in _YAML_SUFFIXES:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError("Configuration root must be a mapping")

    config = VisualizerConfig.from_mapping(payload)
    logger.debug("Loaded configuration from %s: %s", config_path, config.to_dict())
    return config


__all__ = ["ConfigError", "VisualizerConfig", "load_config"]
