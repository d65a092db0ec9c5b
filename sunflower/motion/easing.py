from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..config import SolverConstants

DEFAULT_CONSTANTS = SolverConstants()


class InvalidControlPoint(ValueError):
    pass


# Polynomial coefficients of one Bezier component with P0 = 0 and P3 = 1
def _a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _c(a1: float) -> float:
    return 3.0 * a1


def calc_bezier(t: float, a1: float, a2: float) -> float:
    """Return x(t) given x1, x2, or y(t) given y1, y2."""
    return ((_a(a1, a2) * t + _b(a1, a2)) * t + _c(a1)) * t


def get_slope(t: float, a1: float, a2: float) -> float:
    """Return dx/dt given x1, x2, or dy/dt given y1, y2."""
    return 3.0 * _a(a1, a2) * t * t + 2.0 * _b(a1, a2) * t + _c(a1)


def binary_subdivide(
    x: float,
    lo: float,
    hi: float,
    x1: float,
    x2: float,
    constants: SolverConstants = DEFAULT_CONSTANTS,
) -> float:
    """Bisect [lo, hi] for the t where x(t) == x.

    Stops once the residual is within ``subdivision_precision`` or after
    ``subdivision_max_iterations`` halvings, whichever comes first.
    """
    i = 0
    while True:
        t = lo + (hi - lo) / 2.0
        current_x = calc_bezier(t, x1, x2) - x
        if current_x > 0.0:
            hi = t
        else:
            lo = t
        i += 1
        if abs(current_x) <= constants.subdivision_precision or i >= constants.subdivision_max_iterations:
            return t


def newton_raphson_iterate(
    x: float,
    guess_t: float,
    x1: float,
    x2: float,
    constants: SolverConstants = DEFAULT_CONSTANTS,
) -> float:
    # Fixed iteration count, no convergence check
    for _ in range(constants.newton_iterations):
        slope = get_slope(guess_t, x1, x2)
        if slope == 0.0:
            return guess_t
        guess_t -= (calc_bezier(guess_t, x1, x2) - x) / slope
    return guess_t


def _check_x(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise InvalidControlPoint(f"bezier {name} must be in [0, 1] range, got {value}")


@dataclass(frozen=True)
class LinearEasing:
    """Identity easing, used when the control points lie on the diagonal."""

    def evaluate(self, x: float) -> float:
        return x

    def __call__(self, x: float) -> float:
        return x


@dataclass(frozen=True)
class BezierEasing:
    # Control points (x1, y1, x2, y2); start is (0,0) end is (1,1)
    p1x: float
    p1y: float
    p2x: float
    p2y: float
    constants: SolverConstants = DEFAULT_CONSTANTS
    samples: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_x("x1", self.p1x)
        _check_x("x2", self.p2x)
        step = self.constants.sample_step_size
        table = tuple(
            calc_bezier(i * step, self.p1x, self.p2x)
            for i in range(self.constants.spline_table_size)
        )
        object.__setattr__(self, "samples", table)

    def t_for_x(self, x: float) -> float:
        """Invert x(t) using the sample table as a starting interval.

        Newton-Raphson refines the interpolated guess when the curve is steep
        enough; near-flat regions fall back to bisection.
        """
        c = self.constants
        step = c.sample_step_size
        samples = self.samples
        last = c.spline_table_size - 1

        interval_start = 0.0
        i = 1
        while i != last and samples[i] <= x:
            interval_start += step
            i += 1
        i -= 1

        # Interpolate to provide an initial guess for t
        dist = (x - samples[i]) / (samples[i + 1] - samples[i])
        guess_t = interval_start + dist * step

        slope = get_slope(guess_t, self.p1x, self.p2x)
        if slope >= c.newton_min_slope:
            return newton_raphson_iterate(x, guess_t, self.p1x, self.p2x, c)
        if slope == 0.0:
            return guess_t
        return binary_subdivide(x, interval_start, interval_start + step, self.p1x, self.p2x, c)

    def evaluate(self, x: float) -> float:
        """Return y for a progress x in [0,1].

        x outside [0,1] is not checked; the result there is undefined.
        The endpoints are returned exactly so chained animations land on
        their targets.
        """
        if x == 0:
            return 0.0
        if x == 1:
            return 1.0
        return calc_bezier(self.t_for_x(x), self.p1y, self.p2y)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


Easing = Union[LinearEasing, BezierEasing]


def bezier(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    constants: Optional[SolverConstants] = None,
) -> Easing:
    """Build an easing function from CSS-style cubic-bezier control points.

    Raises InvalidControlPoint when x1 or x2 is outside [0, 1]. y1 and y2 are
    free, so the curve may overshoot.
    """
    _check_x("x1", x1)
    _check_x("x2", x2)
    if x1 == y1 and x2 == y2:
        return LinearEasing()
    return BezierEasing(x1, y1, x2, y2, constants or DEFAULT_CONSTANTS)
