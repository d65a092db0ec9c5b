"""Rotating and shooting particle populations.

Both populations are seeded on a sunflower-seed arrangement: seed k of n sits
at angle 2*pi*k/PHI**2 and at a radius growing with sqrt(k), with the outer
b seeds pinned to the boundary circle. See
http://demonstrations.wolfram.com/SunflowerSeedArrangements/
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..config import SketchConfig
from ..render.base import Canvas

# Golden ratio
PHI = (1 + math.sqrt(5)) / 2


@dataclass
class RotatingParticle:
    r: float
    theta: float
    rotation: float  # radians per frame
    t: float  # age in frames
    gray: float
    s: float


@dataclass
class ShootingParticle:
    sx: float
    sy: float
    dx: float
    dy: float
    t: int
    gray: float
    s: float


def sunflower_radius(k: float, n: int, b: int) -> float:
    """Normalized radius of seed k among n, with b seeds on the boundary."""
    if k > n - b:
        return 1.0
    return math.sqrt(k - 0.5) / math.sqrt(n - (b + 1) / 2)


def boundary_points(n: int, alpha: float) -> int:
    return int(round(alpha * math.sqrt(n)))


def seed_angle(k: float) -> float:
    return 2 * math.pi * k / PHI ** 2


def fade_in(frame: int, frames: int) -> float:
    return min(frame / frames, 1.0)


def shooting_endpoints(k: float, cfg: SketchConfig, rng: random.Random) -> Tuple[float, float, float, float]:
    """Source on the shooting sunflower, destination anywhere inside the circle."""
    n = cfg.n_shooting
    b = boundary_points(n, cfg.shooting_alpha)
    cx, cy = cfg.center
    s_theta = seed_angle(k)
    s_r = sunflower_radius(k, n, b) * cfg.width / 2
    d_theta = rng.uniform(0, 2 * math.pi)
    d_r = rng.uniform(0, cfg.height / 2)
    return (
        cx + s_r * math.cos(s_theta),
        cy + s_r * math.sin(s_theta),
        cx + d_r * math.cos(d_theta),
        cy + d_r * math.sin(d_theta),
    )


def seed_rotating(cfg: SketchConfig, rng: random.Random) -> List[RotatingParticle]:
    n = cfg.n_rotating
    b = boundary_points(n, cfg.rotating_alpha)
    return [
        RotatingParticle(
            r=cfg.width / 2 * sunflower_radius(k, n, b),
            theta=seed_angle(k),
            rotation=rng.uniform(-cfg.max_rotation, cfg.max_rotation),
            t=rng.uniform(0, cfg.rotating_lifetime),
            gray=rng.uniform(0.5, 1),
            s=rng.uniform(1, cfg.max_size),
        )
        for k in range(1, n + 1)
    ]


def seed_shooting(cfg: SketchConfig, rng: random.Random) -> List[ShootingParticle]:
    particles = []
    for k in range(1, cfg.n_shooting + 1):
        sx, sy, dx, dy = shooting_endpoints(k, cfg, rng)
        particles.append(
            ShootingParticle(
                sx=sx,
                sy=sy,
                dx=dx,
                dy=dy,
                t=int(math.floor(rng.uniform(0, cfg.shooting_lifetime))),
                gray=rng.uniform(0.5, 1),
                s=rng.uniform(1, cfg.max_size),
            )
        )
    return particles


def _life_size(life: float, s: float) -> float:
    return max(0.5, math.sin(life * math.pi)) * s


def draw_rotating(
    p: RotatingParticle,
    canvas: Canvas,
    cfg: SketchConfig,
    rng: random.Random,
    opacity: float,
    debug: bool = False,
) -> None:
    p.theta += p.rotation
    p.t += 1
    if p.t >= cfg.rotating_lifetime:
        p.t = 0
        # Reappear somewhere else on the same ring
        p.theta = rng.uniform(0, 2 * math.pi)

    cx, cy = cfg.center
    x = cx + p.r * math.cos(p.theta)
    y = cy + p.r * math.sin(p.theta)
    life = p.t / cfg.rotating_lifetime
    size = _life_size(life, p.s)
    gray = math.sin(life * math.pi) * cfg.max_gray * opacity * p.gray
    canvas.fill(max(gray, cfg.min_gray))
    canvas.ellipse(x, y, size, size)
    if debug:
        canvas.fill("blue")
        canvas.ellipse(x, y, size, size)


def draw_shooting(
    p: ShootingParticle,
    canvas: Canvas,
    cfg: SketchConfig,
    rng: random.Random,
    ease: Callable[[float], float],
    opacity: float,
    debug: bool = False,
) -> None:
    if p.t == cfg.shooting_lifetime:
        p.t = 0
        p.sx, p.sy, p.dx, p.dy = shooting_endpoints(rng.uniform(1, cfg.n_shooting), cfg, rng)
    p.t += 1

    life = p.t / cfg.shooting_lifetime
    eased = ease(life)
    x = p.sx + (p.dx - p.sx) * eased
    y = p.sy + (p.dy - p.sy) * eased

    gray = math.sin(life * math.pi) * cfg.max_gray * opacity
    canvas.fill(gray)
    size = _life_size(life, p.s)
    canvas.ellipse(x, y, size, size)

    if debug:
        canvas.fill("red")
        canvas.ellipse(p.dx, p.dy, cfg.max_size, cfg.max_size)
        canvas.fill("yellow")
        canvas.ellipse(p.sx, p.sy, cfg.max_size, cfg.max_size)
