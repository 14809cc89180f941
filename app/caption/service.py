"""
Purpose:
- The "service" orchestrates delay -> extract features -> select caption -> timed response.
- The delay stands in for model latency; it is awaited so the event loop keeps serving.
"""

from __future__ import annotations
import asyncio
import logging
import random
import time
from typing import Optional

from ..core.settings import Settings
from .features import FeatureExtractor, extract_image_features
from . import rules
from .rules import select_caption
from .schema import CaptionResponse

logger = logging.getLogger(__name__)

IMAGE_PREFIX = "data:image/"

def is_image_data_uri(image: str) -> bool:
    return image.startswith(IMAGE_PREFIX)

def sample_delay_ms(settings: Settings, rng: Optional[random.Random] = None) -> float:
    """Uniform in [min, max); shares the selector's random source by default."""
    rng = rng or rules.RNG
    lo, hi = settings.caption_delay_min_ms, settings.caption_delay_max_ms
    return lo + rng.random() * (hi - lo)

async def generate_caption(
    image: str,
    settings: Settings,
    extractor: FeatureExtractor = extract_image_features,
    rng: Optional[random.Random] = None,
) -> CaptionResponse:
    start = time.perf_counter()

    delay_ms = sample_delay_ms(settings, rng)
    await asyncio.sleep(delay_ms / 1000.0)

    features = extractor(image)
    picked = select_caption(features, rng=rng)

    elapsed_ms = round((time.perf_counter() - start) * 1000.0)
    logger.info(
        "caption generated group=%s confidence=%.2f delay_ms=%.0f elapsed_ms=%d",
        picked.matched_group or "fallback", picked.confidence, delay_ms, elapsed_ms,
    )
    return CaptionResponse(
        caption=picked.caption,
        confidence=picked.confidence,
        processing_time=elapsed_ms,
    )
