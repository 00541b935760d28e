"""Default presentation injected into the render target at setup."""
from __future__ import annotations

STYLE_CSS = """\
.clock {
  font-family: ui-monospace, Menlo, Monaco, "DejaVu Sans Mono", "Liberation Mono", monospace;
  color: #00ff66;
  text-align: center;
  text-shadow: 0 0 10px rgba(0, 255, 102, 0.35);
}
.clock .time {
  font-size: 96px;
  line-height: 1;
}
.clock .date {
  font-size: 28px;
  color: #00aa44;
  margin-top: 12px;
}
"""

INDEX_HTML = """\
<div class="clock">
  <div class="time"></div>
  <div class="date"></div>
</div>
"""
