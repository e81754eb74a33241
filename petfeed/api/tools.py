"""Pet tool API endpoints."""

from fastapi import APIRouter

from petfeed.core.age import calculate_pet_age
from petfeed.schemas.schemas import PetAgeRequest, PetAgeResponse

router = APIRouter(prefix="/tools", tags=["tools"])


@router.post("/pet-age", response_model=PetAgeResponse)
def convert_pet_age(request: PetAgeRequest):
    """Convert a pet's age to human years and a life stage."""
    age = calculate_pet_age(request.species, request.years, request.months, request.size)
    return PetAgeResponse.model_validate(age)
