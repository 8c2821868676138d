"""Configuration for svg-text2symbols.

Settings are read from a YAML file and validated into a Config dataclass.
Lookup order for the file: explicit path, the T2S_CONFIG environment
variable, then ~/.config/svg-text2symbols/config.yaml.
"""

from __future__ import annotations

import logging
import numbers
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from svg_text2symbols.exceptions import ConfigError
from svg_text2symbols.log import parse_level

CONFIG_ENV_VAR = "T2S_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "svg-text2symbols" / "config.yaml"

LINEJOINS = ("miter", "round", "bevel")
LINECAPS = ("butt", "round", "square")


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _level_name(level: Any) -> str:
    """Normalise a level name or number to its standard level name."""
    if not isinstance(level, (str, int)) or isinstance(level, bool):
        raise ConfigError(f"log_level must be a level name, got {level!r}")
    name = logging.getLevelName(parse_level(level))
    if not isinstance(name, str) or name.startswith("Level "):
        raise ConfigError(f"Unknown log level: {level!r}")
    return name


@dataclass
class Config:
    """Render settings shared by the API and the CLI."""

    font: str | None = None
    font_files: list[Path] = field(default_factory=list)
    size: int = 64
    fill: str = "none"
    color: str = "#000"
    letter_spacing: float = 0.1
    stroke_width: float = 1.0
    stroke_linejoin: str = "round"
    stroke_linecap: str = "round"
    max_width: int | None = None
    precision: int = 6
    features: dict[str, bool] = field(default_factory=dict)
    animate: bool = False
    theme: str | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.font_files, (str, Path)) or not isinstance(self.font_files, (list, tuple)):
            raise ConfigError(f"font_files must be a list of paths, got {self.font_files!r}")
        for path in self.font_files:
            if not isinstance(path, (str, os.PathLike)):
                raise ConfigError(f"font_files entries must be paths, got {path!r}")
        self.font_files = [Path(p) for p in self.font_files]
        self.validate()
        self.log_level = _level_name(self.log_level)

    def validate(self) -> None:
        """Raise ConfigError for out-of-range or mistyped values."""
        if self.font is not None and not isinstance(self.font, str):
            raise ConfigError(f"font must be a family name, got {self.font!r}")
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size <= 0:
            raise ConfigError(f"size must be a positive integer, got {self.size!r}")
        if not isinstance(self.precision, int) or isinstance(self.precision, bool) or self.precision < 0:
            raise ConfigError(f"precision must be >= 0, got {self.precision!r}")
        if self.max_width is not None and (
            not isinstance(self.max_width, int) or isinstance(self.max_width, bool) or self.max_width <= 0
        ):
            raise ConfigError(f"max_width must be a positive integer, got {self.max_width!r}")
        for name in ("fill", "color"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.theme is not None and not isinstance(self.theme, str):
            raise ConfigError(f"theme must be a string, got {self.theme!r}")
        if not _is_number(self.letter_spacing):
            raise ConfigError(f"letter_spacing must be a number, got {self.letter_spacing!r}")
        if not _is_number(self.stroke_width) or self.stroke_width < 0:
            raise ConfigError(f"stroke_width must be a number >= 0, got {self.stroke_width!r}")
        if self.stroke_linejoin not in LINEJOINS:
            raise ConfigError(
                f"stroke_linejoin must be one of {', '.join(LINEJOINS)}, got {self.stroke_linejoin!r}"
            )
        if self.stroke_linecap not in LINECAPS:
            raise ConfigError(
                f"stroke_linecap must be one of {', '.join(LINECAPS)}, got {self.stroke_linecap!r}"
            )
        if not isinstance(self.features, Mapping):
            raise ConfigError(f"features must be a mapping of tag to true/false, got {self.features!r}")
        for tag, enabled in self.features.items():
            if not isinstance(tag, str) or len(tag) != 4:
                raise ConfigError(f"Feature tags must be 4 characters, got {tag!r}")
            if not isinstance(enabled, bool):
                raise ConfigError(f"Feature {tag!r} must be true or false, got {enabled!r}")
        if not isinstance(self.animate, bool):
            raise ConfigError(f"animate must be true or false, got {self.animate!r}")
        _level_name(self.log_level)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a parsed mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid config: {e}") from e

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from YAML.

        Args:
            path: Explicit config file. When omitted, T2S_CONFIG and then the
                default user config path are tried.

        Returns:
            Parsed Config, or defaults when no file exists at the default path.

        Raises:
            FileNotFoundError: If an explicitly requested file is missing.
            ConfigError: If the file is not valid YAML or has bad values.
        """
        explicit = path is not None or CONFIG_ENV_VAR in os.environ
        config_path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)

        if not config_path.is_file():
            if explicit:
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return cls()

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {config_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")
        return cls.from_dict(data)

    def merged(self, **overrides: Any) -> Config:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
