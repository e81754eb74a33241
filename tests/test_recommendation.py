"""Tests for the food recommendation engine."""

import dataclasses
import math

import pytest
from petfeed.core.recommendation import (
    FALLBACK_REASON,
    calculate_value_score,
    generate_recommendation_reasons,
    get_nutrition_match,
    get_nutrition_target,
    is_allergen_safe,
    nutrition_distance,
    recommend_products,
    recommend_products_with_score,
    score_products,
)
from petfeed.models.models import ProductSku


def with_sku(product, current_price, history, size_kg=2):
    sku = ProductSku(current_price=current_price, size_kg=size_kg, price_history=tuple(history))
    return dataclasses.replace(product, skus=(sku,))


class TestNutritionTarget:
    """Tests for weight-bracket targets."""

    def test_small_bracket(self):
        target = get_nutrition_target(5)
        assert (target.protein, target.fat, target.fiber, target.ash, target.moisture) == (28, 15, 3, 7, 10)

    def test_bracket_edges(self):
        assert get_nutrition_target(0).protein == 28
        assert get_nutrition_target(6.99).protein == 28
        assert get_nutrition_target(7).protein == 26
        assert get_nutrition_target(17.99).fat == 14
        assert get_nutrition_target(18).protein == 24
        assert get_nutrition_target(80).fat == 13

    def test_unmatched_weight_uses_middle_bracket(self):
        assert get_nutrition_target(-1).protein == 26
        assert get_nutrition_target(math.nan).protein == 26

    def test_nutrition_distance(self, product_a, product_b):
        target = get_nutrition_target(5)
        assert nutrition_distance(product_a, target) == 0
        # |24-28| + |13-15|
        assert nutrition_distance(product_b, target) == 6

    def test_nutrition_match_keeps_sign(self, product_b):
        match = get_nutrition_match(product_b, get_nutrition_target(5))
        assert match.protein.actual == 24
        assert match.protein.target == 28
        assert match.protein.diff == -4
        assert match.fat.diff == -2
        assert match.fiber.diff == 0


class TestValueScore:
    """Tests for price per 100g."""

    def test_price_per_100g(self, product_a):
        # 20000 / 2kg / 10 = 1000 per 100g
        assert calculate_value_score(product_a) == 1000

    def test_uses_first_sku_only(self, product_a, base_sku):
        cheap = ProductSku(current_price=5000, size_kg=10)
        product = dataclasses.replace(product_a, skus=(base_sku, cheap))
        assert calculate_value_score(product) == 1000

    def test_no_skus(self, product_a):
        assert calculate_value_score(dataclasses.replace(product_a, skus=())) == 0

    def test_rounded(self, product_a):
        # 12345 / 1.5 / 10 = 823.0
        assert calculate_value_score(with_sku(product_a, 12345, [], size_kg=1.5)) == 823


class TestRecommendationReasons:
    """Tests for recommendation explanations."""

    def test_matching_product(self, product_a, profile):
        reasons = generate_recommendation_reasons(product_a, profile)
        assert reasons == [
            "조단백질이 소형견 기준(28%)에 가까워요",
            "조지방이 적정 범위(15%) 내에 있어요",
            "조섬유가 적절해 소화 건강을 지원해요",
        ]

    def test_truncated_to_three(self, product_a, profile):
        allergic = dataclasses.replace(profile, allergies=("닭",))
        reasons = generate_recommendation_reasons(product_a, allergic)
        assert len(reasons) == 3
        assert not any("알러지" in reason for reason in reasons)

    def test_high_protein(self, product_a, profile):
        product = dataclasses.replace(product_a, protein=32, fat=30, fiber=8)
        reasons = generate_recommendation_reasons(product, profile)
        assert reasons == ["조단백질이 기준보다 4.0% 높아 활발한 아이에게 적합해요"]

    def test_low_fat(self, product_a, profile):
        product = dataclasses.replace(product_a, protein=20, fat=10.5, fiber=8)
        reasons = generate_recommendation_reasons(product, profile)
        assert reasons == ["저지방(10.5%)으로 체중 관리에 도움돼요"]

    def test_low_protein_high_fat_gives_fallback(self, product_a, profile):
        product = dataclasses.replace(product_a, protein=20, fat=20, fiber=10, allergens=("닭",))
        allergic = dataclasses.replace(profile, allergies=("닭",))
        reasons = generate_recommendation_reasons(product, allergic)
        assert reasons == [FALLBACK_REASON]
        assert "영양" in reasons[0]

    def test_allergy_free_reason(self, product_a, profile):
        product = dataclasses.replace(product_a, protein=20, fat=20, fiber=10)
        allergic = dataclasses.replace(profile, allergies=("닭", "소"))
        reasons = generate_recommendation_reasons(product, allergic)
        assert reasons == ["알러지 유발 성분(닭, 소)이 없어요"]

    def test_size_word_follows_weight(self, product_a, profile):
        medium = dataclasses.replace(product_a, protein=26)
        reasons = generate_recommendation_reasons(medium, dataclasses.replace(profile, weight_kg=10))
        assert reasons[0] == "조단백질이 중형견 기준(26%)에 가까워요"
        large = dataclasses.replace(product_a, protein=24)
        reasons = generate_recommendation_reasons(large, dataclasses.replace(profile, weight_kg=25))
        assert reasons[0] == "조단백질이 대형견 기준(24%)에 가까워요"


class TestScoreProducts:
    """Tests for per-product scoring."""

    def test_scores_all_products_in_order(self, product_a, product_b, profile):
        scored = score_products([product_b, product_a], profile)
        assert [item.product.id for item in scored] == ["b", "a"]
        assert scored[1].nutrition_distance == 0
        assert scored[1].value_score == 1000
        assert scored[1].reasons

    def test_marks_unsafe_products(self, product_a, profile):
        unsafe = dataclasses.replace(product_a, allergens=("닭",))
        scored = score_products([unsafe], dataclasses.replace(profile, allergies=("닭",)))
        assert scored[0].is_safe is False
        assert scored[0].reasons == ()

    def test_no_allergies_is_always_safe(self, product_a, profile):
        unsafe = dataclasses.replace(product_a, allergens=("닭", "소"))
        assert score_products([unsafe], profile)[0].is_safe is True

    def test_price_position_from_history(self, product_a, profile):
        # history spans 18000-22000, current 21000
        product = with_sku(product_a, 21000, [18000, 19000, 20000, 22000])
        scored = score_products([product], profile)[0]
        assert scored.price_position == 75
        assert scored.price_position_label == "중고가"

    def test_price_position_uses_history_extremes(self, product_a, profile):
        product = with_sku(product_a, 20000, [22000, 18000, 21000])
        assert score_products([product], profile)[0].price_position == 50

    def test_short_history_is_mid_price(self, product_a, profile):
        product = with_sku(product_a, 30000, [18000, 19000])
        scored = score_products([product], profile)[0]
        assert scored.price_position == 50
        assert scored.price_position_label == "중가"

    def test_no_skus(self, product_a, profile):
        scored = score_products([dataclasses.replace(product_a, skus=())], profile)[0]
        assert scored.value_score == 0
        assert scored.price_position == 50
        assert scored.price_position_label == "중가"


class TestAllergenSafety:
    """Tests for the allergen filter."""

    @pytest.mark.parametrize("allergies,allergens,expected", [
        ((), (), True),
        ((), ("닭",), True),
        (("닭",), (), True),
        (("닭",), ("소", "연어"), True),
        (("닭",), ("소", "닭"), False),
        (("연어", "닭"), ("닭",), False),
    ])
    def test_safe_iff_no_overlap(self, product_a, profile, allergies, allergens, expected):
        product = dataclasses.replace(product_a, allergens=allergens)
        assert is_allergen_safe(product, dataclasses.replace(profile, allergies=allergies)) is expected


class TestRecommendProducts:
    """Tests for ranking."""

    def test_prioritizes_nutrition_proximity(self, product_a, product_b, profile):
        result = recommend_products([product_b, product_a], profile)
        assert result[0].id == "a"

    def test_excludes_products_with_allergens(self, product_a, product_b, profile):
        result = recommend_products(
            [dataclasses.replace(product_a, allergens=("닭",)), product_b],
            dataclasses.replace(profile, allergies=("닭",)),
        )
        assert [product.id for product in result] == ["b"]

    def test_tie_broken_by_price_position(self, product_a, profile):
        cheap = with_sku(dataclasses.replace(product_a, id="cheap"), 18000, [18000, 20000, 22000])
        pricey = with_sku(dataclasses.replace(product_a, id="pricey"), 22000, [18000, 20000, 22000])
        result = recommend_products_with_score([pricey, cheap], profile)
        assert [item.product.id for item in result] == ["cheap", "pricey"]
        assert result[0].price_position < result[1].price_position

    def test_falls_back_when_nothing_is_safe(self, product_a, profile):
        allergic = dataclasses.replace(profile, allergies=("닭",))
        products = [
            dataclasses.replace(product_a, id=f"p{offset}", protein=28 + offset, allergens=("닭",))
            for offset in (6, 0, 3, 1, 5, 4, 2)
        ]
        result = recommend_products_with_score(products, allergic)
        assert [item.product.id for item in result] == ["p0", "p1", "p2", "p3", "p4"]
        assert all(not item.is_safe for item in result)

    def test_fallback_with_fewer_than_limit(self, product_a, profile):
        unsafe = dataclasses.replace(product_a, allergens=("닭",))
        result = recommend_products([unsafe], dataclasses.replace(profile, allergies=("닭",)))
        assert [product.id for product in result] == ["a"]

    def test_never_empty_for_non_empty_catalog(self, product_a, product_b, profile):
        catalog = [
            dataclasses.replace(product_a, allergens=("닭",)),
            dataclasses.replace(product_b, allergens=("소",)),
        ]
        for allergies in ((), ("닭",), ("소",), ("닭", "소")):
            for weight in (2, 10, 30):
                pet = dataclasses.replace(profile, allergies=allergies, weight_kg=weight)
                assert len(recommend_products(catalog, pet)) > 0

    def test_empty_catalog(self, profile):
        assert recommend_products([], profile) == []

    def test_inputs_not_mutated(self, product_a, product_b, profile):
        products = [product_b, product_a]
        recommend_products(products, profile)
        assert [product.id for product in products] == ["b", "a"]
