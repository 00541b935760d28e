from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Callable
import logging

from .assets import INDEX_HTML, STYLE_CSS
from .config import ClockConfig
from .errors import SetupError
from .render import DATE_SELECTOR, TIME_SELECTOR, RenderOutput, render
from .targets.base import RenderTarget
from .timezones import load_location

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class ClockWidget:
    """Time and date display bound to one render target.

    ``setup`` must succeed before ``update`` is called; it resolves the
    timezone first so that a bad name leaves the target untouched.
    """

    name = "clock"

    def __init__(
        self,
        target: RenderTarget,
        cfg: ClockConfig,
        *,
        stylesheet: str = STYLE_CSS,
        markup: str = INDEX_HTML,
        log: logging.Logger | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self.target = target
        self.cfg = cfg
        self.stylesheet = stylesheet
        self.markup = markup
        self.log = log or logging.getLogger(__name__)
        self._now = now
        self.location: tzinfo | None = None

    def setup(self) -> None:
        self.location = load_location(self.cfg.timezone)
        try:
            self.target.load_css(self.stylesheet)
        except Exception as e:
            raise SetupError(f"loading css: {e}") from e
        self.target.set_inner_html(self.markup)

    def update(self) -> RenderOutput:
        out = render(self._now(), self.location, self.cfg)
        self.target.set_text(TIME_SELECTOR, out.time)
        self.target.set_text(DATE_SELECTOR, out.date)
        self.log.debug("Rendered %s / %s", out.time, out.date)
        return out
