"""
Purpose:
- Sanity-check critical library versions after upgrades.
- Import the exact modules we use, print versions and build the app once so we can spot drift immediately.
"""

import sys
import fastapi
import pydantic
import uvicorn
from pydantic_settings import BaseSettings

print("python", sys.version)
print("fastapi", fastapi.__version__)
print("pydantic", pydantic.VERSION)
print("uvicorn", uvicorn.__version__)
print("pydantic-settings", BaseSettings.__module__.split(".")[0])  # presence check

# app factory + caption table import cleanly
from app.main import create_app
from app.caption.rules import CAPTION_PATTERNS, FALLBACK_CAPTIONS

routes = sorted(r.path for r in create_app().routes if getattr(r, "path", "").startswith("/api"))
print("routes", routes)
print("groups", len(CAPTION_PATTERNS), "fallback", len(FALLBACK_CAPTIONS))
print("OK")
