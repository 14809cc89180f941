"""
Purpose:
- Pick a canned caption for a set of feature tags.
- Ordered keyword groups: the first group whose keyword appears in any tag wins.
- No group hit -> generic fallback pool.

How it's used:
- extract tags (see features.py), then select_caption(tags).
- Confidence is 0.85, +0.10 on a group hit, capped at 0.98.

Extensibility:
- Add/adapt groups in CAPTION_PATTERNS (order is priority).
- Tweak generic text in FALLBACK_CAPTIONS.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

BASE_CONFIDENCE = 0.85
MATCH_BONUS = 0.10
MAX_CONFIDENCE = 0.98

# --- Pattern table -----------------------------------------------------------

@dataclass(frozen=True)
class PatternGroup:
    name: str                   # log label only
    patterns: Tuple[str, ...]   # lower-case substrings
    captions: Tuple[str, ...]

@dataclass(frozen=True)
class CaptionSelection:
    caption: str
    confidence: float
    matched_group: Optional[str] = None   # None -> fallback pool

CAPTION_PATTERNS: Tuple[PatternGroup, ...] = (
    PatternGroup(
        name="person",
        patterns=("person", "people", "human", "face"),
        captions=(
            "A person standing confidently with a warm smile, captured in natural lighting with a softly blurred background.",
            "Portrait of an individual with expressive eyes and genuine expression, photographed with professional composition.",
            "A group of people gathered together in a candid moment, showing natural interaction and positive energy.",
            "Close-up portrait featuring detailed facial features with excellent lighting and shallow depth of field.",
        ),
    ),
    PatternGroup(
        name="building",
        patterns=("building", "architecture", "city", "urban"),
        captions=(
            "Modern architectural structure with clean geometric lines and contemporary design elements against a clear sky.",
            "Urban cityscape featuring tall buildings with interesting play of light and shadow creating dramatic silhouettes.",
            "Detailed architectural photography showcasing intricate design patterns and structural elements with precise composition.",
            "Contemporary building facade with glass and steel construction reflecting the surrounding environment.",
        ),
    ),
    PatternGroup(
        name="nature",
        patterns=("nature", "landscape", "tree", "mountain", "water", "sky"),
        captions=(
            "Breathtaking natural landscape with rolling hills and dramatic sky creating a serene and peaceful atmosphere.",
            "Majestic mountain vista with layered peaks extending into the distance under expansive cloudy skies.",
            "Tranquil water scene reflecting the surrounding landscape with perfect mirror-like clarity and natural beauty.",
            "Lush forest environment with dense vegetation and dappled sunlight filtering through the canopy above.",
        ),
    ),
    PatternGroup(
        name="food",
        patterns=("food", "meal", "restaurant", "kitchen"),
        captions=(
            "Artfully plated gourmet dish with vibrant colors and elegant presentation on pristine white dinnerware.",
            "Delicious culinary creation featuring fresh ingredients arranged with professional chef-level attention to detail.",
            "Appetizing meal showcasing rich textures and appealing colors that highlight the quality of ingredients used.",
            "Restaurant-quality food photography with perfect lighting emphasizing the dish's visual appeal and craftsmanship.",
        ),
    ),
    PatternGroup(
        name="animal",
        patterns=("animal", "pet", "dog", "cat", "wildlife"),
        captions=(
            "Adorable animal captured in a natural pose with expressive eyes and detailed fur texture in soft lighting.",
            "Wildlife photography featuring a beautiful creature in its natural habitat with excellent composition and timing.",
            "Domestic pet displaying personality and charm through body language and facial expression in comfortable setting.",
            "Animal portrait with sharp focus on distinctive features while maintaining a pleasing background blur.",
        ),
    ),
    PatternGroup(
        name="vehicle",
        patterns=("vehicle", "car", "transport", "street"),
        captions=(
            "Sleek vehicle design showcased with dynamic angles highlighting modern engineering and aesthetic appeal.",
            "Transportation scene captured with motion and energy, demonstrating the relationship between vehicle and environment.",
            "Automotive photography featuring clean lines and reflective surfaces under optimal lighting conditions.",
            "Street scene with vehicles integrated into urban environment showing daily life and movement.",
        ),
    ),
)

FALLBACK_CAPTIONS: Tuple[str, ...] = (
    "A well-composed photograph with excellent lighting and clear visual elements that create an engaging and appealing image.",
    "High-quality image featuring interesting visual elements with good composition and professional photographic technique.",
    "Detailed photograph showcasing rich textures and colors with careful attention to lighting and visual balance.",
    "Artistic composition with strong visual impact featuring clear subject matter and skillful use of depth and perspective.",
    "Professional-quality image with excellent clarity and composition that effectively captures the essence of the subject matter.",
)

# process-wide source; not crypto
RNG = random.Random()

# --- Core logic --------------------------------------------------------------

def _group_matches(group: PatternGroup, tags: Sequence[str]) -> bool:
    """Any keyword is a substring of any (lower-cased) tag."""
    return any(pat in tag for pat in group.patterns for tag in tags)

def find_group(features: Iterable[str], groups: Sequence[PatternGroup] = CAPTION_PATTERNS) -> Optional[PatternGroup]:
    """Return the first matching group in table order, or None."""
    tags = [str(f).lower() for f in features]
    for group in groups:
        if _group_matches(group, tags):
            return group
    return None

def select_caption(
    features: Iterable[str],
    rng: Optional[random.Random] = None,
    groups: Sequence[PatternGroup] = CAPTION_PATTERNS,
    fallback: Sequence[str] = FALLBACK_CAPTIONS,
) -> CaptionSelection:
    """
    Choose a caption + confidence for the given tags.
    Only the first matching group is ever used, even if later groups also match.
    """
    rng = rng or RNG
    group = find_group(features, groups)

    if group is None:
        logger.debug("no pattern group matched; using fallback pool")
        return CaptionSelection(caption=rng.choice(fallback), confidence=BASE_CONFIDENCE)

    confidence = min(BASE_CONFIDENCE + MATCH_BONUS, MAX_CONFIDENCE)
    logger.debug("pattern group %r matched", group.name)
    return CaptionSelection(
        caption=rng.choice(group.captions),
        confidence=confidence,
        matched_group=group.name,
    )
