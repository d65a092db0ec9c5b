from __future__ import annotations

import logging
import queue
import random
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Tuple

from ..config import load_config, SketchConfig
from ..motion.easing import bezier, Easing
from ..render.base import DrawOp
from ..render.recording import RecordingCanvas
from ..render.svg import SvgCanvas
from ..sketch.particles import (
    draw_rotating,
    draw_shooting,
    fade_in,
    RotatingParticle,
    seed_rotating,
    seed_shooting,
    ShootingParticle,
)

log = logging.getLogger(__name__)


CommandType = Literal["toggle_debug", "reset"]


@dataclass
class Command:
    type: CommandType
    args: Dict[str, Any]


class SketchController:
    def __init__(self, cfg: Optional[SketchConfig] = None, rng: Optional[random.Random] = None):
        self.cfg: SketchConfig = cfg or load_config()
        self.rng: random.Random = rng or random.Random(self.cfg.seed)
        # Fails with InvalidControlPoint before anything else is set up
        self.ease: Easing = bezier(*self.cfg.ease, constants=self.cfg.solver)

        self.debug: bool = self.cfg.debug
        self.frame_count: int = 0
        self.fps: float = 0.0
        self.status: str = "idle"
        self.error: Optional[str] = None

        self.rotating: List[RotatingParticle] = []
        self.shooting: List[ShootingParticle] = []
        self._seed()

        self._frame_lock = threading.Lock()
        self._frame: RecordingCanvas = RecordingCanvas()
        self._frame_number: int = 0
        self._last_tick: Optional[float] = None

        self._cmd_q: "queue.Queue[Command]" = queue.Queue()
        self._stop_event = threading.Event()
        self._worker: Optional[threading.Thread] = None

    def _seed(self) -> None:
        self.rotating = seed_rotating(self.cfg, self.rng)
        self.shooting = seed_shooting(self.cfg, self.rng)
        log.info(f"Seeded {len(self.rotating)} rotating and {len(self.shooting)} shooting particles")

    # Public API
    def start(self) -> None:
        if self._worker and self._worker.is_alive():
            return
        self._stop_event.clear()
        self.error = None
        self.status = "running"
        self._worker = threading.Thread(target=self._worker_loop, daemon=True)
        self._worker.start()
        log.info(f"Sketch started at {self.cfg.frame_rate} fps")

    def shutdown(self) -> None:
        self._stop_event.set()
        if self._worker:
            self._worker.join(timeout=1.0)
            self._worker = None
        self.status = "idle"
        log.info("Sketch stopped")

    def enqueue_toggle_debug(self) -> None:
        self._cmd_q.put(Command("toggle_debug", {}))

    def enqueue_reset(self) -> None:
        self._cmd_q.put(Command("reset", {}))

    def get_status(self) -> dict:
        return {
            "status": self.status,
            "frame": self.frame_count,
            "fps": round(self.fps, 2),
            "debug": self.debug,
            "rotating": len(self.rotating),
            "shooting": len(self.shooting),
            "error": self.error,
        }

    def latest_frame(self) -> List[DrawOp]:
        with self._frame_lock:
            return list(self._frame.ops)

    def snapshot(self) -> Tuple[int, List[DrawOp]]:
        """Return the latest frame number together with its draw ops."""
        with self._frame_lock:
            return self._frame_number, list(self._frame.ops)

    def render_svg(self) -> str:
        svg = SvgCanvas(self.cfg.width, self.cfg.height)
        with self._frame_lock:
            self._frame.replay(svg)
        return svg.to_svg()

    # Frame loop
    def process_commands(self) -> None:
        while True:
            try:
                cmd = self._cmd_q.get_nowait()
            except queue.Empty:
                return
            if cmd.type == "toggle_debug":
                self.debug = not self.debug
                log.info(f"Debug {'ON' if self.debug else 'OFF'}")
            elif cmd.type == "reset":
                self.frame_count = 0
                self._seed()
                log.info("Sketch reset")

    def step(self) -> RecordingCanvas:
        """Advance every particle by one frame and record the drawing."""
        now = time.perf_counter()
        if self._last_tick is not None and now > self._last_tick:
            self.fps = 1.0 / (now - self._last_tick)
        self._last_tick = now
        self.frame_count += 1

        cfg = self.cfg
        canvas = RecordingCanvas()
        canvas.clear()
        canvas.background(cfg.background)
        canvas.no_stroke()
        if self.debug:
            cx, cy = cfg.center
            canvas.no_fill()
            canvas.stroke("green")
            canvas.ellipse(cx, cy, cfg.width, cfg.height)
            canvas.fill(200)
            canvas.no_stroke()
            canvas.text(f"{self.fps:.2f}fps", 0, 10)

        opacity = fade_in(self.frame_count, cfg.fade_in_frames)
        for p in self.rotating:
            draw_rotating(p, canvas, cfg, self.rng, opacity, self.debug)
        for p in self.shooting:
            draw_shooting(p, canvas, cfg, self.rng, self.ease, opacity, self.debug)

        with self._frame_lock:
            self._frame = canvas
            self._frame_number = self.frame_count
        return canvas

    def _worker_loop(self) -> None:
        period_s = 1.0 / max(1, self.cfg.frame_rate)
        while not self._stop_event.is_set():
            deadline = time.perf_counter() + period_s
            try:
                self.process_commands()
                self.step()
            except Exception as e:
                log.exception("Frame failed")
                self.error = str(e)
                self.status = "error"
                return
            remaining = deadline - time.perf_counter()
            if remaining > 0:
                self._stop_event.wait(remaining)


# Singleton getter
_singleton: Optional[SketchController] = None


def get_controller() -> SketchController:
    global _singleton
    if _singleton is None:
        _singleton = SketchController()
        _singleton.start()
    return _singleton
