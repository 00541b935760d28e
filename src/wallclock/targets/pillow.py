from __future__ import annotations

from pathlib import Path
from PIL import Image, ImageDraw, ImageFont, ImageFilter
import logging
import os

log = logging.getLogger(__name__)

def _hex(c: str) -> tuple[int, int, int]:
    c = c.lstrip("#")
    return tuple(int(c[i:i+2], 16) for i in (0, 2, 4))

def _load_font(theme: dict, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    # Allow explicit font_path, else try family name
    font_path = theme.get("font_path")
    try:
        if font_path:
            fp = os.path.expanduser(font_path)
            return ImageFont.truetype(fp, size=size)
        family = theme.get("font_family", "DejaVuSansMono")
        return ImageFont.truetype(f"{family}.ttf", size=size)
    except OSError:
        return ImageFont.load_default()

def _scanlines(img: Image.Image, strength: int = 18) -> Image.Image:
    w, h = img.size
    overlay = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    d = ImageDraw.Draw(overlay)
    for y in range(0, h, 4):
        d.rectangle([0, y, w, y+1], fill=(0, 0, 0, strength))
    return Image.alpha_composite(img.convert("RGBA"), overlay)

def _draw_glow_text(img: Image.Image, draw: ImageDraw.ImageDraw, xy: tuple[int, int], text: str, font, fill_rgb, glow_rgb, glow_radius: int = 8):
    x, y = xy
    tw, th = draw.textbbox((0, 0), text, font=font)[2:]
    pad = glow_radius * 2
    tmp = Image.new("RGBA", (tw + pad*2, th + pad*2), (0, 0, 0, 0))
    td = ImageDraw.Draw(tmp)
    td.text((pad, pad), text, font=font, fill=(*glow_rgb, 120))
    tmp = tmp.filter(ImageFilter.GaussianBlur(radius=glow_radius))
    img.paste(tmp, (x - pad, y - pad), tmp)
    draw.text((x, y), text, font=font, fill=fill_rgb)

class PillowTarget:
    """Draws the latest time and date into a PNG file.

    The image is redrawn after every text update. Stylesheets have no effect
    here; colours and fonts come from the ``theme`` section instead.
    """

    SELECTOR_ORDER = (".time", ".date")

    def __init__(self, out_path: Path, resolution: tuple[int, int], theme: dict | None = None) -> None:
        self.out_path = out_path
        self.resolution = resolution
        self.theme = theme or {}
        self.texts: dict[str, str] = {}

    def load_css(self, css: str) -> None:
        log.debug("Pillow target ignores stylesheets (%d bytes)", len(css))

    def set_inner_html(self, html: str) -> None:
        self.texts.clear()

    def set_text(self, selector: str, text: str) -> None:
        self.texts[selector] = text
        self.draw()

    def _lines(self) -> list[tuple[str, str]]:
        ordered = [s for s in self.SELECTOR_ORDER if s in self.texts]
        ordered += [s for s in self.texts if s not in self.SELECTOR_ORDER]
        return [(s, self.texts[s]) for s in ordered]

    def draw(self) -> Path:
        w, h = self.resolution
        theme = self.theme
        bg = _hex(theme.get("background", "#020402"))
        fg = _hex(theme.get("foreground", "#00ff66"))
        fg_dim = _hex(theme.get("foreground_dim", "#00aa44"))

        img = Image.new("RGBA", (w, h), (*bg, 255))
        draw = ImageDraw.Draw(img)

        font_time = _load_font(theme, size=max(48, h // 4))
        font_date = _load_font(theme, size=max(18, h // 14))

        lines = self._lines()
        heights = []
        for selector, text in lines:
            font = font_time if selector == ".time" else font_date
            heights.append(draw.textbbox((0, 0), text, font=font)[3])
        gap = max(12, h // 40)
        y = (h - sum(heights) - gap * max(0, len(lines) - 1)) // 2

        for (selector, text), th in zip(lines, heights):
            if selector == ".time":
                font, fill, glow = font_time, fg, 8
            else:
                font, fill, glow = font_date, fg_dim, 4
            tw = draw.textbbox((0, 0), text, font=font)[2]
            _draw_glow_text(img, draw, ((w - tw) // 2, y), text, font, fill, fg, glow_radius=glow)
            y += th + gap

        img = _scanlines(img, strength=18)
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        img.convert("RGB").save(self.out_path, format="PNG")
        return self.out_path

    def close(self) -> None:
        pass

    def __enter__(self) -> "PillowTarget":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
