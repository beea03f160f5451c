"""blockies -- HTTP API.

Serves identicons as JSON icon data, single PNGs, batches with inline
base64 thumbnails, and zip archives.

Launch:
    python -m blockies.server [--port 8000] [--log-level info]
    # or: uvicorn blockies.server:app --reload
"""

from __future__ import annotations

import argparse
import base64
import io
import logging
import zipfile

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response, StreamingResponse
from pydantic import BaseModel

from blockies.icon.generator import (
    DEFAULT_SCALE,
    DEFAULT_SIZE,
    IconData,
    IconSpec,
    generate,
    random_seed,
)
from blockies.icon.renderer import render_icon

MAX_BATCH = 64
MAX_SIZE = 64
MAX_SCALE = 32

logger = logging.getLogger("blockies.server")

app = FastAPI(title="blockies")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _image_to_png(img) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _image_to_base64(img) -> str:
    return base64.b64encode(_image_to_png(img)).decode("ascii")


def _icon_payload(seed: str, icon: IconData) -> dict:
    payload = icon.to_dict()
    payload["seed"] = seed
    payload["pixel_size"] = icon.pixel_size
    return payload


def _error(message: str, status_code: int = 400) -> JSONResponse:
    logger.info("rejected request: %s", message)
    return JSONResponse({"error": message}, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error(problems or "invalid request")


def _check_limits(size: int, scale: int) -> None:
    if size > MAX_SIZE:
        raise ValueError(f"size must be <= {MAX_SIZE}, got {size}")
    if scale > MAX_SCALE:
        raise ValueError(f"scale must be <= {MAX_SCALE}, got {scale}")


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BatchRequest(BaseModel):
    seeds: list[str]
    size: int = DEFAULT_SIZE
    scale: int = DEFAULT_SCALE
    color: str | None = None
    bgcolor: str | None = None
    spotcolor: str | None = None


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------

@app.get("/api/icon")
def api_icon(
    seed: str | None = None,
    size: int = DEFAULT_SIZE,
    scale: int = DEFAULT_SCALE,
    color: str | None = None,
    bgcolor: str | None = None,
    spotcolor: str | None = None,
):
    if seed is None:
        seed = random_seed()
    spec = IconSpec(size=size, scale=scale, seed=seed,
                    color=color, bgcolor=bgcolor, spotcolor=spotcolor)
    try:
        _check_limits(size, scale)
        icon = generate(spec)
    except ValueError as e:
        return _error(str(e))
    logger.debug("icon seed=%r size=%d", seed, size)
    return JSONResponse(_icon_payload(seed, icon))


@app.get("/api/icon.png")
def api_icon_png(
    seed: str | None = None,
    size: int = DEFAULT_SIZE,
    scale: int = DEFAULT_SCALE,
    color: str | None = None,
    bgcolor: str | None = None,
    spotcolor: str | None = None,
):
    if seed is None:
        seed = random_seed()
    spec = IconSpec(size=size, scale=scale, seed=seed,
                    color=color, bgcolor=bgcolor, spotcolor=spotcolor)
    try:
        _check_limits(size, scale)
        img = render_icon(generate(spec))
    except ValueError as e:
        return _error(str(e))
    return Response(
        content=_image_to_png(img),
        media_type="image/png",
        headers={"X-Blockies-Seed": seed},
    )


def _generate_batch(req: BatchRequest) -> list[tuple[str, IconData]]:
    if not req.seeds:
        raise ValueError("seeds must not be empty")
    if len(req.seeds) > MAX_BATCH:
        raise ValueError(f"at most {MAX_BATCH} seeds per request")
    _check_limits(req.size, req.scale)
    return [
        (seed, generate(IconSpec(size=req.size, scale=req.scale, seed=seed, color=req.color,
                                bgcolor=req.bgcolor, spotcolor=req.spotcolor)))
        for seed in req.seeds
    ]


@app.post("/api/icons")
def api_icons(req: BatchRequest):
    try:
        icons = _generate_batch(req)
    except ValueError as e:
        return _error(str(e))

    result = []
    for seed, icon in icons:
        payload = _icon_payload(seed, icon)
        payload["image"] = _image_to_base64(render_icon(icon))
        result.append(payload)
    return JSONResponse(result)


@app.post("/api/export")
def api_export(req: BatchRequest):
    """Render every seed and return a zip file built in memory."""
    try:
        icons = _generate_batch(req)
    except ValueError as e:
        return _error(str(e))

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for i, (_, icon) in enumerate(icons):
            zf.writestr(f"icon_{i:02d}.png", _image_to_png(render_icon(icon)))
    buf.seek(0)

    logger.info("exported %d icons", len(icons))
    return StreamingResponse(
        buf,
        media_type="application/zip",
        headers={"Content-Disposition": "attachment; filename=blockies.zip"},
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    import uvicorn

    p = argparse.ArgumentParser(description="blockies HTTP API")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default="info",
                   choices=["debug", "info", "warning", "error"],
                   help="logging level (default: info)")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("listening on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
