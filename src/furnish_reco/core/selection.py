from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Set

from furnish_reco.core.affinity import (
    ROOM_CATEGORY_MAP,
    ROOM_TYPE_HINT_ALIASES,
    STYLE_CATEGORY_AFFINITY,
)
from furnish_reco.core.scoring import compute_style_score
from furnish_reco.domain.models import (
    AvailableProduct,
    PackageRecommendationInput,
    PackageRecommendationOutput,
    SelectedProduct,
)

logger = logging.getLogger(__name__)

SECONDARY_STYLE_WEIGHT = 0.3
# style used for per-item reasoning when the caller expressed no style
DEFAULT_REASONING_STYLE = "modern"
MIN_BUDGET_REASONING = "Added to meet minimum budget target."
NO_PRODUCTS_REASONING = "No products found within the specified budget range."


@dataclass(frozen=True)
class ScoredProduct:
    product: AvailableProduct
    style_score: float


def _dedupe(values: Sequence[str]) -> List[str]:
    seen: Set[str] = set()
    result: List[str] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            result.append(v)
    return result


def _is_available(product: AvailableProduct, budget_max: int) -> bool:
    if product.price_fils > budget_max:
        return False
    return product.stock_quantity is None or product.stock_quantity > 0


def resolve_target_categories(
    req: PackageRecommendationInput, candidates: Sequence[AvailableProduct]
) -> List[str]:
    targets: List[str] = []
    if req.room_type:
        hint = req.room_type.lower()
        hint = ROOM_TYPE_HINT_ALIASES.get(hint, hint)
        targets.extend(ROOM_CATEGORY_MAP.get(hint, []))
    for style in req.style_preferences:
        targets.extend(STYLE_CATEGORY_AFFINITY.get(style, []))

    targets = _dedupe(targets)
    if not targets:
        targets = _dedupe([p.category for p in candidates])
    return targets


def resolve_primary_style(req: PackageRecommendationInput) -> str:
    if req.style_tag is not None:
        return req.style_tag
    if req.style_preferences:
        return req.style_preferences[0]
    return ""


def rank_by_style(
    candidates: Sequence[AvailableProduct],
    primary_style: str,
    style_preferences: Sequence[str],
) -> List[ScoredProduct]:
    """Score candidates against the primary style plus a 30% share of every other preference.

    The sort is stable, so equally scored products keep their incoming
    (price ascending) order.
    """
    scored: List[ScoredProduct] = []
    for product in candidates:
        style_score = 0.0
        if primary_style:
            style_score = compute_style_score(product.category, product.materials, primary_style).score
        for pref in style_preferences:
            if pref != primary_style:
                bonus = compute_style_score(product.category, product.materials, pref).score
                style_score += bonus * SECONDARY_STYLE_WEIGHT
        scored.append(ScoredProduct(product=product, style_score=style_score))

    return sorted(scored, key=lambda s: s.style_score, reverse=True)


def select_package(req: PackageRecommendationInput) -> PackageRecommendationOutput:
    """Deterministic greedy package selection used whenever the AI service is not."""
    max_items = req.max_items
    budget_max = req.budget_max_fils
    budget_min = req.budget_min_fils or 0

    candidates = [p for p in req.available_products if _is_available(p, budget_max)]
    if not candidates:
        return PackageRecommendationOutput(
            selected_products=[],
            total_price_fils=0,
            package_reasoning=NO_PRODUCTS_REASONING,
            source="fallback",
        )

    target_categories = resolve_target_categories(req, candidates)
    primary_style = resolve_primary_style(req)
    reasoning_style = primary_style or DEFAULT_REASONING_STYLE
    ranked = rank_by_style(candidates, primary_style, req.style_preferences)

    selected: List[SelectedProduct] = []
    used_ids: Set[str] = set()
    covered: List[str] = []
    total = 0

    def _take(product: AvailableProduct, reasoning: str) -> None:
        nonlocal total
        selected.append(SelectedProduct(product_id=product.id, quantity=1, reasoning=reasoning))
        used_ids.add(product.id)
        total += product.price_fils

    def _cover(category: str) -> None:
        if category not in covered:
            covered.append(category)

    def _fits(product: AvailableProduct) -> bool:
        return product.id not in used_ids and total + product.price_fils <= budget_max

    # first pass: one best product per target category
    for category in target_categories:
        if len(selected) >= max_items:
            break
        pick = next(
            (s for s in ranked if s.product.category == category and _fits(s.product)),
            None,
        )
        if pick is None:
            continue
        score = compute_style_score(pick.product.category, pick.product.materials, reasoning_style)
        _take(pick.product, score.reasoning)
        _cover(category)

    # second pass: fill remaining slots, preferring categories not yet covered
    for entry in ranked:
        if len(selected) >= max_items:
            break
        if not _fits(entry.product):
            continue
        if entry.product.category in covered and len(selected) < max_items - 1:
            has_uncovered = any(
                _fits(s.product) and s.product.category not in covered for s in ranked
            )
            if has_uncovered:
                continue
        score = compute_style_score(entry.product.category, entry.product.materials, reasoning_style)
        _take(entry.product, score.reasoning)
        _cover(entry.product.category)

    # best-effort top-up towards the minimum budget, regardless of category
    if total < budget_min and selected:
        for entry in ranked:
            if len(selected) >= max_items:
                break
            if not _fits(entry.product):
                continue
            _take(entry.product, MIN_BUDGET_REASONING)

    logger.debug(
        "fallback selection done items=%s categories=%s total_fils=%s",
        len(selected),
        len(covered),
        total,
    )

    if primary_style:
        style_note = f'Optimized for "{primary_style}" style preference.'
    else:
        style_note = "No specific style applied."
    return PackageRecommendationOutput(
        selected_products=selected,
        total_price_fils=total,
        package_reasoning=(
            f"Rule-based selection: picked {len(selected)} items across {len(covered)} "
            f"categories ({', '.join(covered)}). Total: {total} fils. {style_note}"
        ),
        source="fallback",
    )
