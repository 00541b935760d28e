from __future__ import annotations

from typing import Protocol

class RenderTarget(Protocol):
    """Output surface the clock writes into.

    Selectors are CSS-style class selectors (``.time``, ``.date``) naming
    elements of the markup passed to ``set_inner_html``.
    """

    def load_css(self, css: str) -> None:
        ...

    def set_inner_html(self, html: str) -> None:
        ...

    def set_text(self, selector: str, text: str) -> None:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "RenderTarget":
        ...

    def __exit__(self, *exc) -> None:
        ...
