"""Price position API endpoints."""

from fastapi import APIRouter

from petfeed.core.pricing import (
    build_price_rollup,
    calculate_price_position,
    price_position_in_history,
    price_position_label,
)
from petfeed.schemas.schemas import (
    PriceHistoryPositionRequest,
    PricePositionRequest,
    PricePositionResponse,
    PriceRollupRequest,
    PriceRollupResponse,
)

router = APIRouter(prefix="/price", tags=["prices"])


@router.post("/position", response_model=PricePositionResponse)
def get_price_position(request: PricePositionRequest):
    """Locate a price inside a known min/max range."""
    position = calculate_price_position(
        request.current_price, request.min_price, request.max_price
    )
    return PricePositionResponse(position=round(position, 1), label=price_position_label(position))


@router.post("/history-position", response_model=PricePositionResponse)
def get_history_position(request: PriceHistoryPositionRequest):
    """Locate a price inside the range of its own price history."""
    position = price_position_in_history(request.current_price, request.price_history)
    return PricePositionResponse(position=round(position, 1), label=price_position_label(position))


@router.post("/rollup", response_model=PriceRollupResponse)
def rollup_price(request: PriceRollupRequest):
    """Widen a stored yearly min/max with a newly observed price."""
    rollup = build_price_rollup(request.current_price, request.year_min, request.year_max)
    return PriceRollupResponse.model_validate(rollup)
