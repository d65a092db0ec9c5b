import pytest

from sunflower.config import EASE_SHOOTING, SketchConfig, SolverConstants, load_config


def test_defaults():
    cfg = SketchConfig()
    assert cfg.n_rotating == 480
    assert cfg.n_shooting == 120
    assert cfg.max_size == 4
    assert cfg.center == (300, 300)
    assert cfg.ease == EASE_SHOOTING
    assert cfg.solver.sample_step_size == pytest.approx(0.1)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SKETCH_WIDTH", "300")
    monkeypatch.setenv("SKETCH_FRAME_RATE", "60")
    monkeypatch.setenv("SKETCH_SEED", "42")
    monkeypatch.setenv("SKETCH_EASE", "0.25,0.1,0.25,1")
    monkeypatch.setenv("SKETCH_DEBUG", "yes")
    cfg = load_config()
    assert cfg.width == 300
    assert cfg.frame_rate == 60
    assert cfg.seed == 42
    assert cfg.ease == (0.25, 0.1, 0.25, 1.0)
    assert cfg.debug is True


def test_bad_ease_env(monkeypatch):
    monkeypatch.setenv("SKETCH_EASE", "0.1,0.2")
    with pytest.raises(ValueError):
        load_config()


def test_solver_constants_are_frozen():
    with pytest.raises(Exception):
        SolverConstants().newton_iterations = 8
