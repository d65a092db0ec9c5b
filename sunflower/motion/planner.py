from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from ..config import SolverConstants
from .easing import bezier, LinearEasing
from .models import Ease


def ease_fn(e: Ease, constants: Optional[SolverConstants] = None) -> Callable[[float], float]:
    if e.type == "cubic-bezier":
        x1, y1, x2, y2 = e.p  # type: ignore
        return bezier(x1, y1, x2, y2, constants)
    return LinearEasing()


def sample_curve(e: Ease, n: int = 101) -> Tuple[List[float], List[float]]:
    """Sample the easing curve at n evenly spaced progress values.

    Returns (xs, ys). The first and last x are exactly 0 and 1.
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    f = ease_fn(e)
    xs: List[float] = [i / (n - 1) for i in range(n)]
    ys: List[float] = [f(x) for x in xs]
    return xs, ys
