"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps host/port, delay bounds and messages tunable without code changes.
"""

# --- Purpose: robust settings with env-file support and safe handling of extra keys.
from typing import List, Optional
from pathlib import Path
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",          # <-- prevents crashes if extra env vars exist
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS
    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Allowed origins for browser apps"
    )

    # ---- Auxiliary endpoints ----
    ping_message: str = Field(default="ping", description="Returned by GET /api/ping")
    demo_message: str = Field(default="Hello from the caption API")

    # ---- Simulated inference latency (ms), sampled from [min, max) ----
    caption_delay_min_ms: float = Field(default=800.0, ge=0)
    caption_delay_max_ms: float = Field(default=2000.0, ge=0)

    # base64 images are large; 10 MiB matches the client-side upload cap
    max_body_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    # built SPA bundle to serve at "/" (optional)
    client_dist_dir: Optional[Path] = Field(default=None)

    @model_validator(mode="after")
    def _check_delay_bounds(self):
        if self.caption_delay_max_ms < self.caption_delay_min_ms:
            raise ValueError("caption_delay_max_ms must be >= caption_delay_min_ms")
        return self

settings = Settings()

def get_settings() -> Settings:
    """FastAPI dependency; override in tests via app.dependency_overrides."""
    return settings
