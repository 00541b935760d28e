from __future__ import annotations

from datetime import datetime, timezone
import logging

import pytest

class RecordingTarget:
    def __init__(self, fail_css: bool = False) -> None:
        self.calls: list[tuple] = []
        self.fail_css = fail_css
        self.closed = False

    def load_css(self, css: str) -> None:
        if self.fail_css:
            raise RuntimeError("stylesheet rejected")
        self.calls.append(("load_css", css))

    def set_inner_html(self, html: str) -> None:
        self.calls.append(("set_inner_html", html))

    def set_text(self, selector: str, text: str) -> None:
        self.calls.append(("set_text", selector, text))

    def texts(self) -> list[tuple[str, str]]:
        return [(c[1], c[2]) for c in self.calls if c[0] == "set_text"]

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()

class FakeClock:
    """Monotonic clock whose ``wait`` advances time instead of sleeping."""

    def __init__(self, limit: float | None = None) -> None:
        self.now = 0.0
        self.limit = limit
        self.waits: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def wait(self, timeout: float) -> bool:
        self.waits.append(timeout)
        if self.limit is not None and self.now + timeout > self.limit:
            self.now = self.limit
            return True
        self.now += timeout
        return False

class FakePage:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def add_style_tag(self, content: str) -> None:
        self.calls.append(("add_style_tag", content))

    def eval_on_selector(self, selector: str, expression: str, arg) -> None:
        self.calls.append(("eval_on_selector", selector, arg))

    def screenshot(self, path: str, full_page: bool = False) -> None:
        self.calls.append(("screenshot", path))

@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget()

@pytest.fixture
def fixed_instant() -> datetime:
    return datetime(2025, 6, 5, 18, 4, 0, tzinfo=timezone.utc)

@pytest.fixture
def make_target():
    return RecordingTarget

@pytest.fixture
def make_clock():
    return FakeClock

@pytest.fixture
def page() -> FakePage:
    return FakePage()

@pytest.fixture(autouse=True)
def _reset_wallclock_logger():
    yield
    logger = logging.getLogger("wallclock")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
