from __future__ import annotations

import logging
from typing import List

from .base import Canvas, Color, DrawOp

log = logging.getLogger(__name__)


class RecordingCanvas(Canvas):
    """Canvas that records draw calls; nothing is rasterized."""

    def __init__(self) -> None:
        self.ops: List[DrawOp] = []

    def clear(self) -> None:
        self.ops.clear()
        self.ops.append(DrawOp("clear"))

    def background(self, color: Color) -> None:
        self.ops.append(DrawOp("background", [color]))

    def fill(self, color: Color) -> None:
        self.ops.append(DrawOp("fill", [color]))

    def no_fill(self) -> None:
        self.ops.append(DrawOp("no_fill"))

    def stroke(self, color: Color) -> None:
        self.ops.append(DrawOp("stroke", [color]))

    def no_stroke(self) -> None:
        self.ops.append(DrawOp("no_stroke"))

    def ellipse(self, x: float, y: float, w: float, h: float) -> None:
        self.ops.append(DrawOp("ellipse", [x, y, w, h]))

    def text(self, s: str, x: float, y: float) -> None:
        self.ops.append(DrawOp("text", [s, x, y]))

    def ellipse_count(self) -> int:
        return sum(1 for op in self.ops if op.op == "ellipse")

    def replay(self, target: Canvas) -> None:
        for op in self.ops:
            getattr(target, op.op)(*op.args)
        log.debug(f"Replayed {len(self.ops)} ops onto {type(target).__name__}")
