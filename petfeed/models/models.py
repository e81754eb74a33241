"""Domain records consumed and produced by the feeding engine.

All records are immutable. Callers build them from whatever source holds the
catalog (database rows, request bodies, a bundled fallback list); the engine
never mutates them and never keeps them between calls.
"""

from dataclasses import dataclass, field
from typing import Optional
import enum


class Species(str, enum.Enum):
    DOG = "DOG"
    CAT = "CAT"


class DogSize(str, enum.Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    GIANT = "GIANT"


class LifeStage(str, enum.Enum):
    PUPPY = "PUPPY"
    JUNIOR = "JUNIOR"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    GERIATRIC = "GERIATRIC"


@dataclass(frozen=True)
class PetProfile:
    """A pet as seen by the calculators."""
    species: Species
    weight_kg: float
    is_neutered: bool
    activity_level: int  # 1-5
    allergies: tuple[str, ...] = ()
    name: Optional[str] = None


@dataclass(frozen=True)
class ProductSku:
    """One purchasable bag size of a product."""
    current_price: float
    size_kg: float
    price_history: tuple[float, ...] = ()  # chronological
    id: Optional[str] = None


@dataclass(frozen=True)
class Product:
    """A catalog entry with its guaranteed analysis (percent as fed)."""
    id: str
    species: Species
    protein: float
    fat: float
    fiber: float
    ash: float
    moisture: float
    kcal_per_kg: float
    allergens: tuple[str, ...] = ()
    skus: tuple[ProductSku, ...] = ()
    brand: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class NutritionTarget:
    protein: float
    fat: float
    fiber: float
    ash: float
    moisture: float


@dataclass(frozen=True)
class NutrientMatch:
    actual: float
    target: float
    diff: float  # actual - target, signed


@dataclass(frozen=True)
class NutritionMatch:
    protein: NutrientMatch
    fat: NutrientMatch
    fiber: NutrientMatch


@dataclass(frozen=True)
class ScoredProduct:
    """Per-call scoring of one product against one pet profile."""
    product: Product
    nutrition_distance: float
    value_score: int
    price_position: float
    price_position_label: str
    reasons: tuple[str, ...] = field(default_factory=tuple)
    is_safe: bool = True


@dataclass(frozen=True)
class MixPlan:
    """Daily calories and grams when feeding two products together."""
    kcal_a: float
    kcal_b: float
    grams_a: float
    grams_b: float


@dataclass(frozen=True)
class PriceRollup:
    current_price: float
    year_min: float
    year_max: float


@dataclass(frozen=True)
class PetAge:
    human_age: int
    stage: LifeStage
    description: str
