from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2] / "src"
sys.path.append(str(ROOT))

from furnish_reco.core.room_classifier import (  # noqa: E402
    classify_room_type_by_name,
    fallback_room_classification,
)


@pytest.mark.unit
def test_master_bedroom_is_classified_as_bedroom() -> None:
    result = classify_room_type_by_name("Master Bedroom")

    assert result.type == "BEDROOM"
    assert result.confidence == 0.85
    assert result.source == "fallback"


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("Lounge", "LIVING_ROOM"),
        ("Family Room", "LIVING_ROOM"),
        ("Eat-in corner", "DINING_ROOM"),
        ("Kitchenette", "KITCHEN"),
        ("Guest Powder Room", "BATHROOM"),
        ("Home Office", "STUDY_OFFICE"),
        ("Roof Terrace", "BALCONY"),
    ],
)
def test_keywords_map_to_room_types(name: str, expected: str) -> None:
    assert classify_room_type_by_name(name).type == expected


@pytest.mark.unit
def test_first_matching_pattern_wins() -> None:
    # "living" is checked before "dining"
    assert classify_room_type_by_name("Living & Dining").type == "LIVING_ROOM"


@pytest.mark.unit
def test_unknown_name_defaults_to_other() -> None:
    result = classify_room_type_by_name("Storage Closet")

    assert result.type == "OTHER"
    assert result.confidence == 0.3


@pytest.mark.unit
def test_photo_fallback_is_low_confidence_other() -> None:
    result = fallback_room_classification(["https://storage.example.com/a.jpg"])

    assert result.type == "OTHER"
    assert result.confidence == 0.1
    assert result.source == "fallback"
