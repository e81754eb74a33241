"""Food recommendation API endpoints."""

import logging

from fastapi import APIRouter

from petfeed.core.recommendation import (
    get_nutrition_target,
    recommend_products_with_score,
    score_products,
)
from petfeed.schemas.schemas import (
    NutritionTargetRequest,
    NutritionTargetResponse,
    RecommendRequest,
    ScoredProductResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommend", tags=["recommendations"])


@router.post("", response_model=list[ScoredProductResponse])
def recommend(request: RecommendRequest):
    """
    Rank products for a pet.

    Allergen-safe products come back ordered by how close their guaranteed
    analysis is to the pet's weight-bracket target. If none are safe, the
    five closest products are returned instead.
    """
    profile = request.profile.to_domain()
    products = [product.to_domain() for product in request.products]
    ranked = recommend_products_with_score(products, profile)
    logger.info("Ranked %d of %d products", len(ranked), len(products))
    return [ScoredProductResponse.model_validate(item) for item in ranked]


@router.post("/scores", response_model=list[ScoredProductResponse])
def get_scores(request: RecommendRequest):
    """Score every product without filtering or ranking."""
    profile = request.profile.to_domain()
    products = [product.to_domain() for product in request.products]
    return [ScoredProductResponse.model_validate(item) for item in score_products(products, profile)]


@router.post("/targets", response_model=NutritionTargetResponse)
def get_target(request: NutritionTargetRequest):
    """Target guaranteed analysis for a body weight."""
    return NutritionTargetResponse.model_validate(get_nutrition_target(request.weight_kg))
