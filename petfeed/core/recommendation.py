"""
Food recommendation engine.

Products are compared against a weight-bracket nutrition target using an
L1 distance over the guaranteed analysis. Allergen-safe products are ranked
by that distance, ties going to the cheaper price relative to history.
"""

import logging
import math
from typing import Sequence

from petfeed.core.calculations import round_half_up
from petfeed.core.pricing import (
    NEUTRAL_POSITION,
    calculate_price_position,
    price_position_label,
)
from petfeed.models.models import (
    NutrientMatch,
    NutritionMatch,
    NutritionTarget,
    PetProfile,
    Product,
    ScoredProduct,
)

logger = logging.getLogger(__name__)


# (min_kg inclusive, max_kg exclusive, target)
WEIGHT_TARGETS = (
    (0, 7, NutritionTarget(protein=28, fat=15, fiber=3, ash=7, moisture=10)),
    (7, 18, NutritionTarget(protein=26, fat=14, fiber=3, ash=7, moisture=10)),
    (18, math.inf, NutritionTarget(protein=24, fat=13, fiber=3, ash=7, moisture=10)),
)
DEFAULT_TARGET = WEIGHT_TARGETS[1][2]

# A nutrient within this many points of target counts as a match
NEAR_TARGET_POINTS = 2
FIBER_RANGE = (3, 5)

# Minimum history points before a price position is trusted
MIN_PRICE_HISTORY = 3

# Products returned when nothing is allergen-safe
FALLBACK_LIMIT = 5

MAX_REASONS = 3
FALLBACK_REASON = "영양 균형이 잘 잡힌 사료예요"


def get_nutrition_target(weight_kg: float) -> NutritionTarget:
    """
    Look up the target guaranteed analysis for a body weight.

    Lighter pets get higher protein and fat targets; fiber, ash and moisture
    are constant. Weights outside every bracket use the middle bracket.
    """
    for min_kg, max_kg, target in WEIGHT_TARGETS:
        if min_kg <= weight_kg < max_kg:
            return target
    return DEFAULT_TARGET


def nutrition_distance(product: Product, target: NutritionTarget) -> float:
    """Sum of absolute percentage-point differences across the five nutrients."""
    return (
        abs(product.protein - target.protein) +
        abs(product.fat - target.fat) +
        abs(product.fiber - target.fiber) +
        abs(product.ash - target.ash) +
        abs(product.moisture - target.moisture)
    )


def calculate_value_score(product: Product) -> int:
    """
    Price per 100 g of the first SKU, rounded.

    Returns:
        Price per 100 g, or 0 when the product has no SKU to price
    """
    if not product.skus:
        return 0
    sku = product.skus[0]
    if not sku.size_kg:
        return 0
    return round_half_up((sku.current_price / sku.size_kg) / 10)


def get_nutrition_match(product: Product, target: NutritionTarget) -> NutritionMatch:
    return NutritionMatch(
        protein=NutrientMatch(product.protein, target.protein, product.protein - target.protein),
        fat=NutrientMatch(product.fat, target.fat, product.fat - target.fat),
        fiber=NutrientMatch(product.fiber, target.fiber, product.fiber - target.fiber),
    )


def _size_word(weight_kg: float) -> str:
    if weight_kg < 7:
        return "소형견"
    if weight_kg < 18:
        return "중형견"
    return "대형견"


def _format_percent(value: float) -> str:
    # 12.0 -> "12", 12.5 -> "12.5"
    return f"{value:g}"


def generate_recommendation_reasons(product: Product, profile: PetProfile) -> list[str]:
    """
    Explain why a product suits a pet.

    Rules fire in a fixed priority order (protein, fat, fiber, allergies) and
    at most three reasons are kept. Only favourable findings are reported:
    low protein and high fat produce no reason. When nothing fires a generic
    reason is returned so the list is never empty.
    """
    target = get_nutrition_target(profile.weight_kg)
    match = get_nutrition_match(product, target)
    reasons = []

    if abs(match.protein.diff) <= NEAR_TARGET_POINTS:
        reasons.append(
            f"조단백질이 {_size_word(profile.weight_kg)} 기준"
            f"({_format_percent(target.protein)}%)에 가까워요"
        )
    elif match.protein.diff > 0:
        reasons.append(
            f"조단백질이 기준보다 {match.protein.diff:.1f}% 높아 활발한 아이에게 적합해요"
        )

    if abs(match.fat.diff) <= NEAR_TARGET_POINTS:
        reasons.append(f"조지방이 적정 범위({_format_percent(target.fat)}%) 내에 있어요")
    elif match.fat.diff < 0:
        reasons.append(f"저지방({_format_percent(product.fat)}%)으로 체중 관리에 도움돼요")

    if FIBER_RANGE[0] <= product.fiber <= FIBER_RANGE[1]:
        reasons.append("조섬유가 적절해 소화 건강을 지원해요")

    if profile.allergies and is_allergen_safe(product, profile):
        reasons.append(f"알러지 유발 성분({', '.join(profile.allergies)})이 없어요")

    if not reasons:
        reasons.append(FALLBACK_REASON)

    return reasons[:MAX_REASONS]


def is_allergen_safe(product: Product, profile: PetProfile) -> bool:
    """True unless the product contains one of the pet's allergies."""
    if not profile.allergies:
        return True
    return set(profile.allergies).isdisjoint(product.allergens)


def _price_position(product: Product) -> tuple[float, str]:
    if product.skus and len(product.skus[0].price_history) >= MIN_PRICE_HISTORY:
        sku = product.skus[0]
        position = calculate_price_position(
            sku.current_price, min(sku.price_history), max(sku.price_history)
        )
        return position, price_position_label(position)
    return NEUTRAL_POSITION, price_position_label(NEUTRAL_POSITION)


def score_products(products: Sequence[Product], profile: PetProfile) -> list[ScoredProduct]:
    """
    Score every product against a pet profile.

    Returns one ScoredProduct per input product, in input order. Unsafe
    products are scored but carry no reasons.
    """
    target = get_nutrition_target(profile.weight_kg)
    scored = []

    for product in products:
        is_safe = is_allergen_safe(product, profile)
        position, label = _price_position(product)
        reasons = generate_recommendation_reasons(product, profile) if is_safe else []
        scored.append(ScoredProduct(
            product=product,
            nutrition_distance=nutrition_distance(product, target),
            value_score=calculate_value_score(product),
            price_position=position,
            price_position_label=label,
            reasons=tuple(reasons),
            is_safe=is_safe,
        ))

    return scored


def recommend_products_with_score(
    products: Sequence[Product],
    profile: PetProfile
) -> list[ScoredProduct]:
    """
    Rank products for a pet.

    Allergen-safe products are sorted by nutrition distance, then by price
    position. If no product is safe, the closest FALLBACK_LIMIT products are
    returned regardless of allergens so the result is never empty for a
    non-empty catalog.
    """
    scored = score_products(products, profile)
    safe = [item for item in scored if item.is_safe]

    if not safe:
        if scored:
            logger.debug(
                "No allergen-safe products among %d; returning nearest %d",
                len(scored), FALLBACK_LIMIT,
            )
        return sorted(scored, key=lambda item: item.nutrition_distance)[:FALLBACK_LIMIT]

    return sorted(safe, key=lambda item: (item.nutrition_distance, item.price_position))


def recommend_products(products: Sequence[Product], profile: PetProfile) -> list[Product]:
    """Ranked products without their scoring detail."""
    return [item.product for item in recommend_products_with_score(products, profile)]
