"""Pet age to human age conversion."""

import math

from petfeed.models.models import DogSize, LifeStage, PetAge, Species


# (first-year rate, age at end of year two, rate per year after two)
AGE_CURVES = {
    "cat": (15, 24, 4),
    DogSize.SMALL: (15, 24, 5),
    DogSize.MEDIUM: (15, 24, 5),
    DogSize.LARGE: (15, 24, 6),
    DogSize.GIANT: (12, 22, 7),
}

# (upper bound in pet years, stage, description)
LIFE_STAGES = (
    (2, LifeStage.JUNIOR, "질풍노도의 청소년기"),
    (7, LifeStage.ADULT, "건강하고 활기찬 성년기"),
    (11, LifeStage.SENIOR, "세심한 관리가 필요한 중장년기"),
)


def _human_years(total_years: float, curve: tuple[int, int, int]) -> float:
    first_year, at_two, per_year = curve
    if total_years <= 1:
        return total_years * first_year
    if total_years <= 2:
        # Second year covers the gap between year one and year two
        return first_year + (total_years - 1) * (at_two - first_year)
    return at_two + (total_years - 2) * per_year


def _life_stage(species: Species, total_years: float) -> tuple[LifeStage, str]:
    if total_years < 1:
        if species == Species.CAT:
            return LifeStage.JUNIOR, "호기심 많은 아기 고양이"
        return LifeStage.PUPPY, "에너지 넘치는 강아지"
    for upper, stage, description in LIFE_STAGES:
        if total_years < upper:
            return stage, description
    return LifeStage.GERIATRIC, "사랑과 배려가 필요한 노년기"


def calculate_pet_age(
    species: Species,
    years: float,
    months: float = 0,
    size: DogSize = DogSize.SMALL
) -> PetAge:
    """
    Convert a pet's age to the equivalent human age.

    Cats age 15 human years in their first year, 9 in their second and 4 a
    year afterwards. Dogs follow the same first two years except giant
    breeds (12, then 10), and age 5/6/7 a year afterwards depending on size.

    Args:
        species: DOG or CAT
        years: Whole years of age
        months: Additional months
        size: Dog size class, ignored for cats

    Returns:
        PetAge with the floored human age and the life stage
    """
    total_years = max(0, years + months / 12)
    curve = AGE_CURVES["cat"] if species == Species.CAT else AGE_CURVES[size]
    stage, description = _life_stage(species, total_years)
    return PetAge(
        human_age=math.floor(_human_years(total_years, curve)),
        stage=stage,
        description=description,
    )
