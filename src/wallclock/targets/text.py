from __future__ import annotations

from typing import TextIO
import sys

class TextTarget:
    """Writes each text update as a ``selector text`` line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.texts: dict[str, str] = {}

    def load_css(self, css: str) -> None:
        pass

    def set_inner_html(self, html: str) -> None:
        self.texts.clear()

    def set_text(self, selector: str, text: str) -> None:
        self.texts[selector] = text
        print(f"{selector} {text}", file=self.stream, flush=True)

    def close(self) -> None:
        pass

    def __enter__(self) -> "TextTarget":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
