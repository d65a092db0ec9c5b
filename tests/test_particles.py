import math
import random

import pytest

from sunflower.config import SketchConfig
from sunflower.motion.easing import bezier
from sunflower.render.recording import RecordingCanvas
from sunflower.sketch.particles import (
    PHI,
    RotatingParticle,
    ShootingParticle,
    boundary_points,
    draw_rotating,
    draw_shooting,
    fade_in,
    seed_angle,
    seed_rotating,
    seed_shooting,
    shooting_endpoints,
    sunflower_radius,
)


@pytest.fixture
def cfg():
    return SketchConfig(seed=1)


def test_sunflower_radius_bounds():
    n, b = 480, boundary_points(480, 2.0)
    radii = [sunflower_radius(k, n, b) for k in range(1, n + 1)]
    assert all(0 < r <= 1 for r in radii)
    assert radii == sorted(radii)
    assert radii[-b:] == [1.0] * b
    assert radii[-b - 1] < 1.0


def test_boundary_points():
    assert boundary_points(480, 2.0) == 44
    assert boundary_points(120, 0.0) == 0


def test_seed_angle_uses_golden_ratio():
    assert seed_angle(1) == pytest.approx(2 * math.pi / PHI ** 2)


def test_fade_in():
    assert fade_in(0, 50) == 0
    assert fade_in(25, 50) == 0.5
    assert fade_in(500, 50) == 1.0


def test_seed_counts_and_ranges(cfg):
    rng = random.Random(0)
    rotating = seed_rotating(cfg, rng)
    shooting = seed_shooting(cfg, rng)
    assert len(rotating) == cfg.n_rotating == 480
    assert len(shooting) == cfg.n_shooting == 120
    for p in rotating:
        assert 0 < p.r <= cfg.width / 2
        assert abs(p.rotation) <= cfg.max_rotation
        assert 0 <= p.t <= cfg.rotating_lifetime
        assert 0.5 <= p.gray <= 1
        assert 1 <= p.s <= cfg.max_size
    for p in shooting:
        assert isinstance(p.t, int)
        assert 0 <= p.t < cfg.shooting_lifetime


def test_shooting_endpoints_inside_canvas(cfg):
    rng = random.Random(3)
    cx, cy = cfg.center
    for k in range(1, cfg.n_shooting + 1):
        sx, sy, dx, dy = shooting_endpoints(k, cfg, rng)
        assert math.hypot(sx - cx, sy - cy) <= cfg.width / 2 + 1e-9
        assert math.hypot(dx - cx, dy - cy) <= cfg.height / 2 + 1e-9


def test_seeding_is_reproducible(cfg):
    assert seed_rotating(cfg, random.Random(5)) == seed_rotating(cfg, random.Random(5))


def test_draw_rotating_advances_and_fills(cfg):
    p = RotatingParticle(r=100.0, theta=0.0, rotation=0.01, t=49, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_rotating(p, canvas, cfg, random.Random(0), opacity=1.0)
    assert p.t == 50
    assert p.theta == pytest.approx(0.01)
    fill, ellipse = canvas.ops
    assert fill.op == "fill"
    assert fill.args[0] == pytest.approx(cfg.max_gray)
    x, y, w, h = ellipse.args
    assert x == pytest.approx(300 + 100 * math.cos(0.01))
    assert y == pytest.approx(300 + 100 * math.sin(0.01))
    assert w == h == pytest.approx(2.0)


def test_draw_rotating_gray_floor(cfg):
    p = RotatingParticle(r=10.0, theta=0.0, rotation=0.0, t=0, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_rotating(p, canvas, cfg, random.Random(0), opacity=0.0)
    assert canvas.ops[0].args[0] == cfg.min_gray


def test_draw_rotating_respawns(cfg):
    p = RotatingParticle(r=10.0, theta=0.0, rotation=0.0, t=99, gray=1.0, s=2.0)
    draw_rotating(p, RecordingCanvas(), cfg, random.Random(0), opacity=1.0)
    assert p.t == 0
    assert 0 <= p.theta <= 2 * math.pi


def test_draw_rotating_debug_overlay(cfg):
    p = RotatingParticle(r=10.0, theta=0.0, rotation=0.0, t=10, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_rotating(p, canvas, cfg, random.Random(0), opacity=1.0, debug=True)
    assert [op.op for op in canvas.ops] == ["fill", "ellipse", "fill", "ellipse"]
    assert canvas.ops[2].args == ["blue"]


def test_draw_shooting_follows_ease(cfg):
    ease = bezier(*cfg.ease)
    p = ShootingParticle(sx=0.0, sy=0.0, dx=100.0, dy=200.0, t=49, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_shooting(p, canvas, cfg, random.Random(0), ease, opacity=1.0)
    assert p.t == 50
    x, y, _, _ = canvas.ops[1].args
    assert x == pytest.approx(100 * ease(0.5))
    assert y == pytest.approx(200 * ease(0.5))


def test_draw_shooting_lands_on_destination(cfg):
    ease = bezier(*cfg.ease)
    p = ShootingParticle(sx=1.0, sy=2.0, dx=30.0, dy=40.0, t=99, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_shooting(p, canvas, cfg, random.Random(0), ease, opacity=1.0)
    assert p.t == 100
    x, y, _, _ = canvas.ops[1].args
    assert (x, y) == (30.0, 40.0)


def test_draw_shooting_respawns(cfg):
    ease = bezier(*cfg.ease)
    p = ShootingParticle(sx=1.0, sy=2.0, dx=30.0, dy=40.0, t=100, gray=1.0, s=2.0)
    canvas = RecordingCanvas()
    draw_shooting(p, canvas, cfg, random.Random(0), ease, opacity=1.0, debug=True)
    assert p.t == 1
    assert (p.dx, p.dy) != (30.0, 40.0)
    assert canvas.ellipse_count() == 3
