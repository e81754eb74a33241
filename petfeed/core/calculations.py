"""
Core math engine for pet feeding calculations.

RER (Resting Energy Requirement): 70 × (weight_kg ^ 0.75)
DER (Daily Energy Requirement): RER × activity factor

Every function here is total: out-of-range input degrades to 0 or a clamped
value instead of raising, so the result can always be shown as a label.
Input validation belongs to the caller (see petfeed.schemas).
"""

import math

from petfeed.models.models import MixPlan, Product


# Modified Atwater factors for pet food (kcal/g)
MODIFIED_ATWATER = {
    "protein": 3.5,
    "fat": 8.5,
    "carbs": 3.5,  # NFE
}

# Base multipliers applied to RER
NEUTERED_BASE_FACTOR = 1.2
INTACT_BASE_FACTOR = 1.4

# Per-level multipliers, indexed by activity level - 1
ACTIVITY_LEVEL_MULTIPLIERS = (0.9, 1.0, 1.15, 1.3, 1.5)

MIN_ACTIVITY_LEVEL = 1
MAX_ACTIVITY_LEVEL = 5


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed range [lower, upper]."""
    return min(max(value, lower), upper)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def calculate_nfe(
    protein: float,
    fat: float,
    fiber: float,
    ash: float,
    moisture: float
) -> float:
    """
    Calculate Nitrogen-Free Extract (NFE) from a guaranteed analysis.

    Formula: NFE = 100 - (Protein% + Fat% + Fiber% + Ash% + Moisture%)

    The result is floored at 0 when the label values sum past 100.

    Returns:
        NFE percentage (carbohydrates and other)
    """
    nfe = 100 - (protein + fat + fiber + ash + moisture)
    return max(0, nfe)


def estimate_kcal_per_kg(
    protein: float,
    fat: float,
    fiber: float,
    ash: float,
    moisture: float
) -> int:
    """
    Estimate energy density from a guaranteed analysis.

    Uses Modified Atwater factors:
    - Protein: 3.5 kcal/g
    - Fat: 8.5 kcal/g
    - Carbs (NFE): 3.5 kcal/g

    Returns:
        Estimated kcal per kg, rounded to an integer
    """
    nfe = calculate_nfe(protein, fat, fiber, ash, moisture)
    kcal_per_100g = (
        protein * MODIFIED_ATWATER["protein"] +
        fat * MODIFIED_ATWATER["fat"] +
        nfe * MODIFIED_ATWATER["carbs"]
    )
    return round_half_up(kcal_per_100g * 10)


def calculate_rer(weight_kg: float) -> float:
    """
    Calculate Resting Energy Requirement (RER).

    Formula: RER = 70 × (weight_kg ^ 0.75)

    Args:
        weight_kg: Pet's weight in kilograms

    Returns:
        RER in kcal/day, 0 for a non-positive weight
    """
    if weight_kg <= 0:
        return 0.0
    return 70 * (weight_kg ** 0.75)


def activity_factor(level: int, is_neutered: bool) -> float:
    """
    Determine the multiplier applied to RER.

    Neutered pets start from 1.2, intact pets from 1.4. The base is then
    scaled by the per-level multiplier; levels outside 1-5 are clamped.

    Args:
        level: Activity level, 1 (couch) to 5 (very active)
        is_neutered: Whether the pet is neutered/spayed

    Returns:
        Activity factor multiplier
    """
    base = NEUTERED_BASE_FACTOR if is_neutered else INTACT_BASE_FACTOR
    idx = int(clamp(level, MIN_ACTIVITY_LEVEL, MAX_ACTIVITY_LEVEL)) - 1
    return base * ACTIVITY_LEVEL_MULTIPLIERS[idx]


def calculate_der(weight_kg: float, level: int, is_neutered: bool) -> float:
    """
    Calculate Daily Energy Requirement (DER).

    Formula: DER = RER × activity_factor(level, is_neutered)

    Returns:
        DER in kcal/day
    """
    return calculate_rer(weight_kg) * activity_factor(level, is_neutered)


def calculate_daily_grams(der_kcal: float, kcal_per_kg: float) -> float:
    """
    Convert a daily calorie target to grams of food.

    Formula: grams = (der_kcal / kcal_per_kg) × 1000

    Returns:
        Grams per day, or 0 when the energy density is unknown (0)
    """
    if not kcal_per_kg:
        return 0
    return (der_kcal / kcal_per_kg) * 1000


def mix_plan(
    der_kcal: float,
    product_a: Product,
    product_b: Product,
    ratio_a: float
) -> MixPlan:
    """
    Split a daily calorie target between two foods.

    ratio_a is the share of calories coming from product_a, clamped to
    [0, 1]. Grams are computed per product because energy density differs.

    Returns:
        MixPlan with kcal and grams for each product
    """
    ratio = clamp(ratio_a, 0, 1)
    kcal_a = der_kcal * ratio
    kcal_b = der_kcal * (1 - ratio)
    return MixPlan(
        kcal_a=kcal_a,
        kcal_b=kcal_b,
        grams_a=calculate_daily_grams(kcal_a, product_a.kcal_per_kg),
        grams_b=calculate_daily_grams(kcal_b, product_b.kcal_per_kg),
    )
