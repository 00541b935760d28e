from __future__ import annotations

from pathlib import Path
from playwright.sync_api import Error as PlaywrightError, Page, sync_playwright

from ..errors import SetupError

MODULE_SELECTOR = "#module"

PAGE_TEMPLATE = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Wallclock</title>
  <style>
    html, body {{
      margin: 0;
      width: {w}px;
      height: {h}px;
      background: {bg};
      overflow: hidden;
    }}
    body {{
      display: flex;
      align-items: center;
      justify-content: center;
    }}
  </style>
</head>
<body>
  <div id="module"></div>
</body>
</html>
"""

class WebTarget:
    """Renders into a live browser page driven by Playwright.

    The widget markup lives inside ``#module``; text updates set the
    ``textContent`` of the matching element. With ``screenshot_path`` set,
    the page is captured to that file after every update.
    """

    def __init__(self, page: Page, screenshot_path: Path | None = None, on_close=None) -> None:
        self.page = page
        self.screenshot_path = screenshot_path
        self._on_close = on_close

    @classmethod
    def launch(
        cls,
        resolution: tuple[int, int],
        theme: dict,
        web_cfg: dict,
        screenshot_path: Path | None = None,
    ) -> "WebTarget":
        w, h = resolution
        scale = float(web_cfg.get("viewport_device_scale_factor", 1))
        headless = bool(web_cfg.get("headless", True))
        browser_name = str(web_cfg.get("browser", "chromium"))

        try:
            p = sync_playwright().start()
        except (PlaywrightError, OSError) as e:
            raise SetupError(f"starting playwright: {e}") from e
        try:
            browser = getattr(p, browser_name).launch(headless=headless)
            page = browser.new_page(viewport={"width": w, "height": h}, device_scale_factor=scale)
            page.set_content(PAGE_TEMPLATE.format(w=w, h=h, bg=theme.get("background", "#020402")))
        except (PlaywrightError, OSError, AttributeError) as e:
            p.stop()
            raise SetupError(f"launching {browser_name}: {e}") from e

        def _shutdown() -> None:
            browser.close()
            p.stop()

        if screenshot_path is not None:
            screenshot_path.parent.mkdir(parents=True, exist_ok=True)
        return cls(page, screenshot_path=screenshot_path, on_close=_shutdown)

    def load_css(self, css: str) -> None:
        self.page.add_style_tag(content=css)

    def set_inner_html(self, html: str) -> None:
        self.page.eval_on_selector(MODULE_SELECTOR, "(el, html) => { el.innerHTML = html; }", html)

    def set_text(self, selector: str, text: str) -> None:
        self.page.eval_on_selector(
            f"{MODULE_SELECTOR} {selector}", "(el, text) => { el.textContent = text; }", text
        )
        if self.screenshot_path is not None:
            self.page.screenshot(path=str(self.screenshot_path), full_page=False)

    def close(self) -> None:
        if self._on_close is not None:
            self._on_close()
            self._on_close = None

    def __enter__(self) -> "WebTarget":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
