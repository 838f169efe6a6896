"""FastAPI application factory and server start‑up."""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import uvicorn

from trekrank import __version__
from trekrank.core.config import load_config
from trekrank.core.exceptions import ParameterValidationError, RenderError, TrekRankError
from trekrank.core.logging_setup import get_logger, setup_logging_from_config
from trekrank.services.dataset import get_catalog

log = get_logger("api.app")


def create_app(cfg: Optional[Dict[str, Any]] = None):
    """Build and return the configured FastAPI application."""
    from fastapi import FastAPI, Request
    from fastapi.responses import JSONResponse

    from trekrank.api.routes import router

    cfg = cfg if cfg is not None else load_config()

    app = FastAPI(
        title="TrekRank",
        version=__version__,
        description="Ranked list of Star Trek episodes",
    )
    app.state.dataset_path = cfg.get("dataset_path")

    # ── Error mapping ─────────────────────────────────────────────────
    @app.exception_handler(ParameterValidationError)
    async def _bad_params(request: Request, exc: ParameterValidationError):
        log.warning("Rejected %s: %s (%s)", request.url.query, exc, exc.code)
        return JSONResponse(
            {"status": "error", "code": exc.code, "msg": str(exc)},
            status_code=400,
        )

    @app.exception_handler(RenderError)
    async def _render_failed(request: Request, exc: RenderError):
        log.error("Render failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            {"status": "error", "code": "RenderError", "msg": str(exc)},
            status_code=500,
        )

    @app.exception_handler(TrekRankError)
    async def _internal(request: Request, exc: TrekRankError):
        log.error("%s failed: %s", request.url.path, exc)
        return JSONResponse(
            {"status": "error", "code": type(exc).__name__, "msg": str(exc)},
            status_code=500,
        )

    # ── Access log ────────────────────────────────────────────────────
    @app.middleware("http")
    async def _access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        log.info("%s %s → %d (%.2f ms)", request.method, target, response.status_code, elapsed_ms)
        return response

    app.include_router(router)
    return app


def start_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Configure logging, load the catalog, and start uvicorn."""
    cfg = load_config()
    setup_logging_from_config(cfg)

    # Fail at start‑up rather than on the first request
    get_catalog(cfg.get("dataset_path"))

    srv_cfg = cfg.get("server", {})
    host = host or srv_cfg.get("host", "0.0.0.0")
    port = port or srv_cfg.get("port", 3000)

    log.info("Starting TrekRank server on %s:%d", host, port)

    app = create_app(cfg)
    uvicorn.run(app, host=host, port=port, log_level="warning")
