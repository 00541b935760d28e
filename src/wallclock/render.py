from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from .config import ClockConfig
from .layout import format_time

TIME_SELECTOR = ".time"
DATE_SELECTOR = ".date"

@dataclass(frozen=True)
class RenderOutput:
    time: str
    date: str

def localize(now: datetime, location: tzinfo | None) -> datetime:
    """Convert ``now`` into ``location``, or the ambient local zone when unset."""
    if location is None:
        return now.astimezone()
    return now.astimezone(location)

def render(now: datetime, location: tzinfo | None, cfg: ClockConfig) -> RenderOutput:
    zoned = localize(now, location)
    return RenderOutput(
        time=format_time(zoned, cfg.time_format),
        date=format_time(zoned, cfg.date_format),
    )
