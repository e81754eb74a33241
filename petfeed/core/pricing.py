"""
Price positioning: where a current price sits inside its historical range.

Position 0 means the cheapest price seen, 100 the most expensive.
"""

from typing import Optional, Sequence

from petfeed.core.calculations import clamp
from petfeed.models.models import PriceRollup


# Position used when there is no price variance to compare against
NEUTRAL_POSITION = 50.0

# (inclusive upper bound, label)
PRICE_POSITION_LABELS = (
    (20, "저가"),
    (40, "중저가"),
    (60, "중가"),
    (80, "중고가"),
)
HIGHEST_PRICE_LABEL = "고가"


def build_price_rollup(
    current_price: float,
    year_min: Optional[float],
    year_max: Optional[float]
) -> PriceRollup:
    """
    Fold a freshly observed price into a stored yearly min/max.

    Missing bounds start at the current price. The range can only widen.

    Args:
        current_price: Latest observed price
        year_min: Stored yearly minimum, None if never recorded
        year_max: Stored yearly maximum, None if never recorded

    Returns:
        PriceRollup with the updated range
    """
    low = current_price if year_min is None else year_min
    high = current_price if year_max is None else year_max
    return PriceRollup(
        current_price=current_price,
        year_min=min(low, current_price),
        year_max=max(high, current_price),
    )


def calculate_price_position(current: float, minimum: float, maximum: float) -> float:
    """
    Calculate the percentile of current inside [minimum, maximum].

    Formula: position = ((current - min) / (max - min)) × 100, clamped to 0-100

    Returns:
        Position in [0, 100]; exactly 50 when min == max
    """
    if maximum == minimum:
        return NEUTRAL_POSITION
    return clamp(((current - minimum) / (maximum - minimum)) * 100, 0, 100)


def price_position_in_history(current: float, history: Sequence[float]) -> float:
    """Position of current within the range spanned by history and current."""
    if not history:
        return NEUTRAL_POSITION
    return calculate_price_position(
        current,
        min(min(history), current),
        max(max(history), current),
    )


def price_position_label(position: float) -> str:
    """Map a 0-100 position to its price bucket label."""
    for upper, label in PRICE_POSITION_LABELS:
        if position <= upper:
            return label
    return HIGHEST_PRICE_LABEL
