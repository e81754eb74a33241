"""Feeding calculator API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from petfeed.core.calculations import (
    activity_factor,
    calculate_daily_grams,
    calculate_der,
    calculate_nfe,
    calculate_rer,
    clamp,
    estimate_kcal_per_kg,
    mix_plan,
)
from petfeed.models.models import PetProfile
from petfeed.schemas.schemas import (
    EnergyResponse,
    FeedingPlanRequest,
    FeedingPlanResponse,
    GuaranteedAnalysis,
    KcalEstimateResponse,
    MixPlanResponse,
    PetProfileIn,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculator", tags=["calculator"])


def compute_energy(profile: PetProfile) -> EnergyResponse:
    """RER, activity factor and DER for a profile, rounded for display."""
    rer = calculate_rer(profile.weight_kg)
    factor = activity_factor(profile.activity_level, profile.is_neutered)
    der = calculate_der(profile.weight_kg, profile.activity_level, profile.is_neutered)
    return EnergyResponse(
        rer=round(rer, 2),
        activity_factor=round(factor, 4),
        der=round(der, 2),
    )


@router.post("/energy", response_model=EnergyResponse)
def calculate_energy(request: PetProfileIn):
    """Calculate resting and daily energy requirements for a pet."""
    return compute_energy(request.to_domain())


@router.post("/plan", response_model=FeedingPlanResponse)
def compute_feeding_plan(request: FeedingPlanRequest):
    """
    Compute daily feeding amounts for a pet.

    Returns:
    - Energy requirements (RER/DER)
    - Daily grams when one product is given
    - Calorie and gram split when two products are given
    """
    if request.product_b is not None and request.product_a is None:
        raise HTTPException(status_code=400, detail="product_b requires product_a")

    profile = request.profile.to_domain()
    energy = compute_energy(profile)
    der = calculate_der(profile.weight_kg, profile.activity_level, profile.is_neutered)

    if request.product_a is None:
        return FeedingPlanResponse(energy=energy)

    product_a = request.product_a.to_domain()
    if request.product_b is None:
        grams = calculate_daily_grams(der, product_a.kcal_per_kg)
        return FeedingPlanResponse(energy=energy, daily_grams=round(grams, 1))

    product_b = request.product_b.to_domain()
    plan = mix_plan(der, product_a, product_b, request.ratio_a)
    logger.info(
        "Mixed plan %s/%s at ratio %.2f: %.1fg + %.1fg",
        product_a.id, product_b.id, request.ratio_a, plan.grams_a, plan.grams_b,
    )
    return FeedingPlanResponse(
        energy=energy,
        mix=MixPlanResponse(
            ratio_a=clamp(request.ratio_a, 0, 1),
            kcal_a=round(plan.kcal_a, 2),
            kcal_b=round(plan.kcal_b, 2),
            grams_a=round(plan.grams_a, 1),
            grams_b=round(plan.grams_b, 1),
        ),
    )


@router.post("/kcal-estimate", response_model=KcalEstimateResponse)
def estimate_kcal(analysis: GuaranteedAnalysis):
    """Estimate energy density from a bag's guaranteed analysis (Modified Atwater)."""
    values = (analysis.protein, analysis.fat, analysis.fiber, analysis.ash, analysis.moisture)
    return KcalEstimateResponse(
        nfe=round(calculate_nfe(*values), 2),
        kcal_per_kg=estimate_kcal_per_kg(*values),
    )
