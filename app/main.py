"""
Purpose:
- FastAPI application factory and router mounts.
- Adds CORS, a body-size guard, request timing logs and the 400 shape for bad bodies.
- Uvicorn will serve this on 0.0.0.0:8000 by default.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .core.settings import Settings, settings, get_settings
from .core.logging import setup_logging
from .api.health import router as health_router
from .api.caption import router as caption_router
from .api.middleware import BodySizeLimitMiddleware

logger = logging.getLogger(__name__)

def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or settings
    setup_logging(cfg.log_level)

    app = FastAPI(title="Image Caption API", version="0.1.0")
    if cfg is not settings:
        app.dependency_overrides[get_settings] = lambda: cfg

    # inside CORS so 413s still carry CORS headers
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=cfg.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method, request.url.path, response.status_code,
            (time.perf_counter() - start) * 1000.0,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.warning("invalid request body on %s: %d issue(s)", request.url.path, len(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request format", "details": jsonable_encoder(exc.errors())},
        )

    app.include_router(health_router)
    app.include_router(caption_router)

    # SPA last so /api/* wins
    if cfg.client_dist_dir and cfg.client_dist_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(cfg.client_dist_dir), html=True), name="client")
        logger.info("serving client bundle from %s", cfg.client_dist_dir)

    return app



app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
