from __future__ import annotations

from ..config import TARGET_KINDS, Config
from ..errors import ConfigError
from .base import RenderTarget
from .pillow import PillowTarget
from .text import TextTarget
from .web import WebTarget

KINDS = TARGET_KINDS

def open_target(kind: str, cfg: Config) -> RenderTarget:
    kind = kind.lower().strip()
    if kind == "text":
        return TextTarget()
    if kind == "pillow":
        return PillowTarget(cfg.output_path, cfg.resolution, cfg.theme)
    if kind == "web":
        screenshot = cfg.output_path if cfg.web_renderer.get("screenshot", False) else None
        return WebTarget.launch(cfg.resolution, cfg.theme, cfg.web_renderer, screenshot)
    raise ConfigError(f"Unknown target: {kind}")
