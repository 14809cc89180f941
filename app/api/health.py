# Common language: ping/demo endpoints for the client plus an ops probe that surfaces
# version pins and the active caption config.

from fastapi import APIRouter, Depends
from ..core.settings import Settings, get_settings
from ..caption.schema import PingResponse, DemoResponse
from ..caption.rules import CAPTION_PATTERNS, FALLBACK_CAPTIONS
import sys, importlib

router = APIRouter(tags=["health"])

@router.get("/api/ping", response_model=PingResponse)
def ping(settings: Settings = Depends(get_settings)):
    return PingResponse(message=settings.ping_message)

@router.get("/api/demo", response_model=DemoResponse)
def demo(settings: Settings = Depends(get_settings)):
    """
    Static payload the client uses to check it can reach the server.
    """
    return DemoResponse(message=settings.demo_message)

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except Exception:
        return "not-installed"

@router.get("/healthz")
def healthz(settings: Settings = Depends(get_settings)):
    client_dir = settings.client_dist_dir
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
        },
        "caption": {
            "delay_ms": [settings.caption_delay_min_ms, settings.caption_delay_max_ms],
            "max_body_bytes": settings.max_body_bytes,
            "pattern_groups": [g.name for g in CAPTION_PATTERNS],
            "fallback_pool_size": len(FALLBACK_CAPTIONS),
        },
        "client": {
            "dist_dir": str(client_dir) if client_dir else None,
            "mounted": bool(client_dir and client_dir.is_dir()),
        },
    }
