from __future__ import annotations

from html import escape
from typing import List, Optional

from .base import Canvas, Color, to_css


class SvgCanvas(Canvas):
    """Canvas that builds an SVG document.

    Notes:
    - Fill and stroke are state, as in p5; each shape picks up the current values.
    - A background is painted as a full-size rect below every shape.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._fill: Optional[str] = "rgb(255,255,255)"
        self._stroke: Optional[str] = None
        self._background: Optional[str] = None
        self._elements: List[str] = []

    def clear(self) -> None:
        self._background = None
        self._elements = []

    def background(self, color: Color) -> None:
        self._background = to_css(color)
        self._elements = []

    def fill(self, color: Color) -> None:
        self._fill = to_css(color)

    def no_fill(self) -> None:
        self._fill = None

    def stroke(self, color: Color) -> None:
        self._stroke = to_css(color)

    def no_stroke(self) -> None:
        self._stroke = None

    def _paint(self) -> str:
        fill = self._fill or "none"
        stroke = self._stroke or "none"
        return f'fill="{fill}" stroke="{stroke}"'

    def ellipse(self, x: float, y: float, w: float, h: float) -> None:
        self._elements.append(
            f'<ellipse cx="{x:.2f}" cy="{y:.2f}" rx="{w / 2:.2f}" ry="{h / 2:.2f}" {self._paint()}/>'
        )

    def text(self, s: str, x: float, y: float) -> None:
        # Text is filled only, like p5 with noStroke
        fill = self._fill or "none"
        self._elements.append(f'<text x="{x:.2f}" y="{y:.2f}" fill="{fill}">{escape(s)}</text>')

    def to_svg(self) -> str:
        head = (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}">'
        )
        body = []
        if self._background:
            body.append(f'<rect width="100%" height="100%" fill="{self._background}"/>')
        body.extend(self._elements)
        return head + "".join(body) + "</svg>"
