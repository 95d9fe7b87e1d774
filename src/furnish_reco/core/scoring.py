from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from furnish_reco.core.affinity import STYLE_CATEGORY_AFFINITY, STYLE_MATERIAL_AFFINITY
from furnish_reco.domain.models import StyleMatchInput, StyleMatchOutput

BASE_SCORE = 0.3
CATEGORY_BONUS = 0.35
MATERIAL_BONUS_PER_MATCH = 0.12
MATERIAL_BONUS_CAP = 0.35


@dataclass(frozen=True)
class StyleScore:
    score: float
    reasoning: str


def _clamp_0_1(value: float) -> float:
    return max(0.0, min(value, 1.0))


def _matching_materials(
    affinity_materials: Sequence[str], product_materials: Sequence[str]
) -> List[str]:
    normalized = [m.lower() for m in product_materials]
    return [
        am
        for am in affinity_materials
        if any(am in pm or pm in am for pm in normalized)
    ]


def compute_style_score(
    category: str,
    materials: Optional[Sequence[str]],
    style_tag: str,
) -> StyleScore:
    """Rule-based style affinity of one product, 0.0-1.0 rounded to 2 decimals.

    Every product starts at a baseline of 0.3. Category affinity adds 0.35;
    each affinity material found in the product materials adds 0.12, with the
    material bonus capped at 0.35.
    """
    score = BASE_SCORE
    reasons: List[str] = []

    affinity_categories = STYLE_CATEGORY_AFFINITY.get(style_tag)
    if affinity_categories and category in affinity_categories:
        score += CATEGORY_BONUS
        reasons.append(f"{category} is a common category for {style_tag} style")

    affinity_materials = STYLE_MATERIAL_AFFINITY.get(style_tag)
    if affinity_materials and materials:
        matched = _matching_materials(affinity_materials, materials)
        if matched:
            score += min(MATERIAL_BONUS_CAP, len(matched) * MATERIAL_BONUS_PER_MATCH)
            reasons.append(f"Materials ({', '.join(matched)}) complement {style_tag} style")

    score = round(_clamp_0_1(score), 2)
    if reasons:
        reasoning = ". ".join(reasons) + "."
    else:
        reasoning = f"Basic relevance for {style_tag} style."
    return StyleScore(score=score, reasoning=reasoning)


def fallback_style_match(style_input: StyleMatchInput) -> StyleMatchOutput:
    result = compute_style_score(
        style_input.product_category,
        style_input.product_materials,
        style_input.style_tag,
    )
    return StyleMatchOutput(
        product_id=style_input.product_id,
        style_tag=style_input.style_tag,
        score=result.score,
        reasoning=result.reasoning,
        source="fallback",
    )
