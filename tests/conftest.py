"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from petfeed.main import app
from petfeed.models.models import PetProfile, Product, ProductSku, Species


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def base_sku():
    return ProductSku(
        id="sku-1",
        size_kg=2,
        current_price=20000,
        price_history=(18000, 19000, 20000, 22000),
    )


@pytest.fixture
def product_a(base_sku):
    """Matches the small-dog target exactly."""
    return Product(
        id="a",
        species=Species.DOG,
        brand="A",
        name="A",
        protein=28,
        fat=15,
        fiber=3,
        ash=7,
        moisture=10,
        kcal_per_kg=3600,
        skus=(base_sku,),
    )


@pytest.fixture
def product_b():
    return Product(
        id="b",
        species=Species.DOG,
        brand="B",
        name="B",
        protein=24,
        fat=13,
        fiber=3,
        ash=7,
        moisture=10,
        kcal_per_kg=3600,
        skus=(ProductSku(id="sku-2", size_kg=2, current_price=18000,
                         price_history=(18000, 18000, 18000)),),
    )


@pytest.fixture
def profile():
    return PetProfile(
        name="Test",
        species=Species.DOG,
        weight_kg=5,
        is_neutered=True,
        activity_level=3,
    )
