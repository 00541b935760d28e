from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping
import os
import yaml

from .errors import ConfigError

TARGET_KINDS = ("text", "pillow", "web")

SUPPORTED_RESOLUTIONS = {
    "800x480": (800, 480),
    "1024x600": (1024, 600),
    "1280x720": (1280, 720),
    "1920x1080": (1920, 1080),
}

# Option name -> keys accepted in external configuration.
CLOCK_KEYS = {
    "time_format": ("TimeFormat", "time_format"),
    "date_format": ("DateFormat", "date_format"),
    "timezone": ("Timezone", "timezone"),
}

def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))

@dataclass(frozen=True)
class ClockConfig:
    time_format: str = "15:04"
    date_format: str = "Monday, January 2"
    timezone: str = "Local"

def resolve_clock_config(overrides: Mapping[str, Any] | None) -> ClockConfig:
    """Overlay external options on the defaults, field by field.

    Fields missing from ``overrides`` keep their default. Format patterns are
    not checked here; the timezone is validated when the widget is set up.
    """
    if overrides is None:
        return ClockConfig()
    if not isinstance(overrides, Mapping):
        raise ConfigError(f"clock options must be a mapping, got {type(overrides).__name__}")

    changes: dict[str, str] = {}
    for attr, keys in CLOCK_KEYS.items():
        for key in keys:
            if key not in overrides or overrides[key] is None:
                continue
            value = overrides[key]
            if not isinstance(value, str):
                raise ConfigError(f"clock.{key} must be a string, got {value!r}")
            changes[attr] = value
            break
    return replace(ClockConfig(), **changes)

@dataclass(frozen=True)
class Config:
    raw: dict = field(default_factory=dict)

    @property
    def clock(self) -> ClockConfig:
        return resolve_clock_config(self.raw.get("clock"))

    @property
    def target_kind(self) -> str:
        kind = str(self._section("target").get("kind", "text")).lower().strip()
        if kind not in TARGET_KINDS:
            raise ConfigError(f"Unknown target.kind {kind!r}. Supported: {list(TARGET_KINDS)}")
        return kind

    @property
    def resolution(self) -> tuple[int, int]:
        res = str(self._section("target").get("resolution", "800x480"))
        if res not in SUPPORTED_RESOLUTIONS:
            raise ConfigError(f"Unsupported resolution {res!r}. Supported: {list(SUPPORTED_RESOLUTIONS)}")
        return SUPPORTED_RESOLUTIONS[res]

    @property
    def output_path(self) -> Path:
        out = self._section("target").get("output", "~/.cache/wallclock/clock.png")
        return Path(_expand(str(out)))

    @property
    def theme(self) -> dict:
        return self._section("theme")

    @property
    def web_renderer(self) -> dict:
        return self._section("web_renderer")

    @property
    def stylesheet_path(self) -> Path | None:
        p = self._section("assets").get("stylesheet")
        return Path(_expand(str(p))) if p else None

    @property
    def markup_path(self) -> Path | None:
        p = self._section("assets").get("markup")
        return Path(_expand(str(p))) if p else None

    @property
    def log_level(self) -> str:
        return str(self._section("logging").get("level", "INFO")).upper()

    def validate(self) -> "Config":
        """Parse every section now so errors surface before anything starts."""
        self.clock, self.target_kind, self.resolution, self.output_path
        self.theme, self.web_renderer, self.log_level
        self.stylesheet_path, self.markup_path
        return self

    def _section(self, name: str) -> dict:
        value = self.raw.get(name)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigError(f"{name} must be a mapping in the config file.")
        return value

def load_config(path: str | Path | None) -> Config:
    if path is None:
        return Config()
    p = Path(_expand(str(path)))
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Could not read {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {p}: {e}") from e
    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ConfigError("config.yaml must contain a YAML mapping at top level.")
    return Config(raw=raw)

def read_asset(path: Path | None, default: str) -> str:
    """Return the file's text, or ``default`` when no path is configured."""
    if path is None:
        return default
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read asset {path}: {e}") from e
