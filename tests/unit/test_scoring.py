from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2] / "src"
sys.path.append(str(ROOT))

from furnish_reco.core.scoring import compute_style_score, fallback_style_match  # noqa: E402
from furnish_reco.domain.models import StyleMatchInput  # noqa: E402


@pytest.mark.unit
def test_leather_sofa_scores_category_and_material_for_modern() -> None:
    result = compute_style_score("SOFA", ["leather"], "modern")

    assert result.score == 0.77
    assert result.score > 0.65
    assert "SOFA is a common category for modern style" in result.reasoning
    assert "Materials (leather) complement modern style" in result.reasoning


@pytest.mark.unit
def test_no_affinity_signal_keeps_baseline_and_generic_reasoning() -> None:
    result = compute_style_score("BED", None, "modern")

    assert result.score == 0.3
    assert result.reasoning == "Basic relevance for modern style."


@pytest.mark.unit
def test_unknown_style_only_gets_baseline() -> None:
    result = compute_style_score("SOFA", ["leather"], "gothic")

    assert result.score == 0.3
    assert result.reasoning == "Basic relevance for gothic style."


@pytest.mark.unit
def test_material_bonus_is_capped() -> None:
    result = compute_style_score("OTHER", ["marble", "velvet", "silk", "gold"], "luxury")

    assert result.score == 0.65


@pytest.mark.unit
def test_score_is_clamped_to_one() -> None:
    result = compute_style_score("SOFA", ["marble", "velvet", "silk", "gold"], "luxury")

    assert result.score == 1.0


@pytest.mark.unit
def test_material_match_is_case_insensitive_substring() -> None:
    result = compute_style_score("OTHER", ["Polished CHROME"], "modern")

    assert result.score == 0.42
    assert "chrome" in result.reasoning


@pytest.mark.unit
def test_material_match_works_in_both_directions() -> None:
    # "wood" matches both "wood" and "reclaimed wood"
    result = compute_style_score("DINING_TABLE", ["Wood"], "rustic")

    assert result.score == 0.89
    assert "Materials (wood, reclaimed wood)" in result.reasoning


@pytest.mark.unit
def test_fallback_style_match_wraps_score() -> None:
    output = fallback_style_match(
        StyleMatchInput(
            product_id="p-1",
            style_tag="modern",
            product_category="SOFA",
            product_materials=["leather"],
        )
    )

    assert output.product_id == "p-1"
    assert output.style_tag == "modern"
    assert output.score == 0.77
    assert output.source == "fallback"
