from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Union

# Gray level (0..255, clamped) or any CSS color string
Color = Union[float, str]


def to_css(color: Color) -> str:
    if isinstance(color, str):
        return color
    g = int(round(max(0.0, min(float(color), 255.0))))
    return f"rgb({g},{g},{g})"


@dataclass
class DrawOp:
    op: str
    args: List[Union[float, str]] = field(default_factory=list)


class Canvas(ABC):
    """Abstract 2D drawing surface with p5-like fill/stroke state."""

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def background(self, color: Color) -> None:
        ...

    @abstractmethod
    def fill(self, color: Color) -> None:
        ...

    @abstractmethod
    def no_fill(self) -> None:
        ...

    @abstractmethod
    def stroke(self, color: Color) -> None:
        ...

    @abstractmethod
    def no_stroke(self) -> None:
        ...

    @abstractmethod
    def ellipse(self, x: float, y: float, w: float, h: float) -> None:
        """Draw an ellipse centered on (x, y) with width w and height h."""
        ...

    @abstractmethod
    def text(self, s: str, x: float, y: float) -> None:
        ...
