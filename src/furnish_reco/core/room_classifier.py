from __future__ import annotations

from typing import Sequence

from furnish_reco.core.affinity import ROOM_NAME_KEYWORDS
from furnish_reco.domain.models import RoomClassificationOutput

NAME_MATCH_CONFIDENCE = 0.85
NAME_MISS_CONFIDENCE = 0.3
PHOTO_FALLBACK_CONFIDENCE = 0.1


def classify_room_type_by_name(name: str) -> RoomClassificationOutput:
    """Keyword heuristic over a free-text room name; first matching room type wins."""
    lower = name.lower()
    for pattern in ROOM_NAME_KEYWORDS:
        if any(kw in lower for kw in pattern["keywords"]):
            return RoomClassificationOutput(
                type=str(pattern["type"]),
                confidence=NAME_MATCH_CONFIDENCE,
                source="fallback",
            )
    return RoomClassificationOutput(type="OTHER", confidence=NAME_MISS_CONFIDENCE, source="fallback")


def fallback_room_classification(photo_urls: Sequence[str]) -> RoomClassificationOutput:
    # photo contents cannot be inspected without the AI service
    return RoomClassificationOutput(
        type="OTHER", confidence=PHOTO_FALLBACK_CONFIDENCE, source="fallback"
    )
