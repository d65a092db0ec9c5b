from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Shooting particle easing; reads like easeOutQuart on easings.net
EASE_SHOOTING: Tuple[float, float, float, float] = (0.165, 0.84, 0.44, 1.0)


@dataclass(frozen=True)
class SolverConstants:
    # Established empirically (performance vs precision tradeoff)
    newton_iterations: int = 4
    newton_min_slope: float = 0.001
    subdivision_precision: float = 0.0000001
    subdivision_max_iterations: int = 10
    spline_table_size: int = 11

    def __post_init__(self) -> None:
        if self.spline_table_size < 2:
            raise ValueError(f"spline_table_size must be >= 2, got {self.spline_table_size}")
        if self.newton_iterations < 0:
            raise ValueError(f"newton_iterations must be >= 0, got {self.newton_iterations}")
        if self.subdivision_max_iterations < 1:
            raise ValueError(f"subdivision_max_iterations must be >= 1, got {self.subdivision_max_iterations}")

    @property
    def sample_step_size(self) -> float:
        return 1.0 / (self.spline_table_size - 1.0)


@dataclass
class SketchConfig:
    # Canvas
    width: int = 600
    height: int = 600
    frame_rate: int = 30
    background: str = "#222"

    # Populations, in particles per pixel of canvas width
    rotating_density: float = 0.8
    shooting_density: float = 0.2

    # Lifetimes in frames
    rotating_lifetime: int = 100
    shooting_lifetime: int = 100

    # Gray levels
    max_gray: float = 256.0
    min_gray: float = 34.0

    # Sunflower boundary smoothing (0 = no boundary points)
    rotating_alpha: float = 2.0
    shooting_alpha: float = 0.0

    fade_in_frames: int = 50
    max_rotation: float = math.pi / 400  # radians per frame

    ease: Tuple[float, float, float, float] = EASE_SHOOTING
    solver: SolverConstants = field(default_factory=SolverConstants)

    seed: Optional[int] = None
    debug: bool = False

    @property
    def n_rotating(self) -> int:
        return int(self.width * self.rotating_density)

    @property
    def n_shooting(self) -> int:
        return int(self.width * self.shooting_density)

    @property
    def max_size(self) -> float:
        return self.width * 4 / 600

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2


def _parse_ease(raw: str) -> Tuple[float, float, float, float]:
    parts = [float(p) for p in raw.split(",")]
    if len(parts) != 4:
        raise ValueError(f"SKETCH_EASE needs 4 comma separated values, got {raw!r}")
    return parts[0], parts[1], parts[2], parts[3]


def load_config() -> SketchConfig:
    cfg = SketchConfig()
    # Allow simple env overrides
    cfg.width = int(os.getenv("SKETCH_WIDTH", cfg.width))
    cfg.height = int(os.getenv("SKETCH_HEIGHT", cfg.height))
    cfg.frame_rate = int(os.getenv("SKETCH_FRAME_RATE", cfg.frame_rate))
    seed = os.getenv("SKETCH_SEED")
    cfg.seed = int(seed) if seed else None
    ease = os.getenv("SKETCH_EASE")
    if ease:
        cfg.ease = _parse_ease(ease)
    cfg.debug = os.getenv("SKETCH_DEBUG", "false").lower() in ("1", "true", "yes")
    return cfg
