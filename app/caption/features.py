"""
Purpose:
- Small interface for image "feature extraction".
- Stub now; a real detector can be swapped in without changing the API surface.

Notes:
- Takes the raw data-URI string and returns abstract feature tags.
- The payload is never decoded. Every image yields the same tags.
"""

from __future__ import annotations
from typing import Callable, List

FeatureExtractor = Callable[[str], List[str]]

STUB_FEATURES = ("object", "scene", "lighting", "composition")

def extract_image_features(image: str) -> List[str]:
    """
    Placeholder extractor. Replace with object detection / scene classification later.
    """
    return list(STUB_FEATURES)
