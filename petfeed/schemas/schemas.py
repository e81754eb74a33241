"""Pydantic schemas for request/response validation."""

from typing import Optional
from pydantic import BaseModel, Field

from petfeed.models.models import (
    DogSize,
    LifeStage,
    PetProfile,
    Product,
    ProductSku,
    Species,
)


# Pet profile schemas
class PetProfileIn(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    species: Species = Species.DOG
    weight_kg: float = Field(..., gt=0, le=200)
    is_neutered: bool
    activity_level: int = Field(3, ge=1, le=5)
    allergies: list[str] = []

    def to_domain(self) -> PetProfile:
        return PetProfile(
            species=self.species,
            weight_kg=self.weight_kg,
            is_neutered=self.is_neutered,
            activity_level=self.activity_level,
            allergies=tuple(self.allergies),
            name=self.name,
        )


# Product schemas
class ProductSkuIn(BaseModel):
    id: Optional[str] = None
    current_price: float = Field(..., gt=0)
    size_kg: float = Field(..., gt=0, description="Bag size in kg")
    price_history: list[float] = Field([], description="Historical prices, oldest first")

    def to_domain(self) -> ProductSku:
        return ProductSku(
            current_price=self.current_price,
            size_kg=self.size_kg,
            price_history=tuple(self.price_history),
            id=self.id,
        )


class ProductIn(BaseModel):
    id: str = Field(..., min_length=1)
    species: Species = Species.DOG
    brand: Optional[str] = None
    name: Optional[str] = None
    protein: float = Field(..., ge=0, le=100, description="Crude Protein %")
    fat: float = Field(..., ge=0, le=100, description="Crude Fat %")
    fiber: float = Field(..., ge=0, le=100, description="Crude Fiber %")
    ash: float = Field(..., ge=0, le=100, description="Ash %")
    moisture: float = Field(..., ge=0, le=100, description="Moisture %")
    kcal_per_kg: float = Field(..., gt=0)
    allergens: list[str] = []
    skus: list[ProductSkuIn] = []

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            species=self.species,
            protein=self.protein,
            fat=self.fat,
            fiber=self.fiber,
            ash=self.ash,
            moisture=self.moisture,
            kcal_per_kg=self.kcal_per_kg,
            allergens=tuple(self.allergens),
            skus=tuple(sku.to_domain() for sku in self.skus),
            brand=self.brand,
            name=self.name,
        )


class ProductSkuResponse(BaseModel):
    id: Optional[str]
    current_price: float
    size_kg: float
    price_history: list[float]

    class Config:
        from_attributes = True


class ProductResponse(BaseModel):
    id: str
    species: Species
    brand: Optional[str]
    name: Optional[str]
    protein: float
    fat: float
    fiber: float
    ash: float
    moisture: float
    kcal_per_kg: float
    allergens: list[str]
    skus: list[ProductSkuResponse]

    class Config:
        from_attributes = True


# Calculator schemas
class EnergyResponse(BaseModel):
    rer: float
    activity_factor: float
    der: float


class FeedingPlanRequest(BaseModel):
    profile: PetProfileIn
    product_a: Optional[ProductIn] = None
    product_b: Optional[ProductIn] = None
    ratio_a: float = Field(0.5, description="Share of calories from product A; clamped to 0-1")


class MixPlanResponse(BaseModel):
    ratio_a: float
    kcal_a: float
    kcal_b: float
    grams_a: float
    grams_b: float

    class Config:
        from_attributes = True


class FeedingPlanResponse(BaseModel):
    energy: EnergyResponse
    daily_grams: Optional[float] = None  # Single-product feeding
    mix: Optional[MixPlanResponse] = None  # Two-product feeding


class GuaranteedAnalysis(BaseModel):
    """Guaranteed Analysis from a bag label."""
    protein: float = Field(..., ge=0, le=100, description="Crude Protein %")
    fat: float = Field(..., ge=0, le=100, description="Crude Fat %")
    fiber: float = Field(..., ge=0, le=100, description="Crude Fiber %")
    ash: float = Field(7.0, ge=0, le=100, description="Ash %")
    moisture: float = Field(10.0, ge=0, le=100, description="Moisture %")


class KcalEstimateResponse(BaseModel):
    nfe: float
    kcal_per_kg: int


# Price schemas
class PricePositionRequest(BaseModel):
    current_price: float = Field(..., gt=0)
    min_price: float = Field(..., gt=0)
    max_price: float = Field(..., gt=0)


class PriceHistoryPositionRequest(BaseModel):
    current_price: float = Field(..., gt=0)
    price_history: list[float] = []


class PricePositionResponse(BaseModel):
    position: float
    label: str


class PriceRollupRequest(BaseModel):
    current_price: float = Field(..., gt=0)
    year_min: Optional[float] = Field(None, gt=0)
    year_max: Optional[float] = Field(None, gt=0)


class PriceRollupResponse(BaseModel):
    current_price: float
    year_min: float
    year_max: float

    class Config:
        from_attributes = True


# Recommendation schemas
class RecommendRequest(BaseModel):
    profile: PetProfileIn
    products: list[ProductIn] = []


class ScoredProductResponse(BaseModel):
    product: ProductResponse
    nutrition_distance: float
    value_score: int
    price_position: float
    price_position_label: str
    reasons: list[str]
    is_safe: bool

    class Config:
        from_attributes = True


class NutritionTargetRequest(BaseModel):
    weight_kg: float = Field(..., gt=0, le=200)


class NutritionTargetResponse(BaseModel):
    protein: float
    fat: float
    fiber: float
    ash: float
    moisture: float

    class Config:
        from_attributes = True


# Tool schemas
class PetAgeRequest(BaseModel):
    species: Species
    years: int = Field(..., ge=0, le=40)
    months: int = Field(0, ge=0, le=11)
    size: DogSize = DogSize.SMALL


class PetAgeResponse(BaseModel):
    human_age: int
    stage: LifeStage
    description: str

    class Config:
        from_attributes = True
