from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, Response

from ..controller.manager import get_controller
from ..motion.models import Ease, EaseRequest, EaseResponse, EaseSample
from ..motion.planner import ease_fn, sample_curve

log = logging.getLogger(__name__)


app = FastAPI(title="Sunflower Sketch API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


static_dir = Path(__file__).parent / "static"


@app.get("/", response_class=HTMLResponse)
def root_page():
    index_file = static_dir / "index.html"
    return FileResponse(str(index_file))


@app.get("/api/status")
def api_status():
    ctl = get_controller()
    return ctl.get_status()


@app.get("/api/frame")
def api_frame():
    ctl = get_controller()
    frame, ops = ctl.snapshot()
    return {"frame": frame, "ops": [asdict(op) for op in ops]}


@app.get("/api/frame.svg")
def api_frame_svg():
    ctl = get_controller()
    return Response(content=ctl.render_svg(), media_type="image/svg+xml")


@app.post("/api/click")
def api_click():
    """Toggle the debug overlay, like clicking the canvas."""
    ctl = get_controller()
    ctl.enqueue_toggle_debug()
    return {"ok": True}


@app.post("/api/reset")
def api_reset():
    ctl = get_controller()
    ctl.enqueue_reset()
    return {"ok": True}


@app.post("/api/ease", response_model=EaseResponse)
def api_ease(req: EaseRequest):
    f = ease_fn(req.ease)
    return EaseResponse(y=[f(x) for x in req.x])


@app.post("/api/ease/sample", response_model=EaseSample)
def api_ease_sample(ease: Ease, n: int = Query(101, ge=2, le=1001)):
    xs, ys = sample_curve(ease, n)
    return EaseSample(x=xs, y=ys)
