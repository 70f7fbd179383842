from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipe_finder.catalog.data_store import get_recipes
from recipe_finder.catalog.models import Difficulty, Ingredient, Recipe
from recipe_finder.recommendations.models import (
    CookTimeRange,
    RankingMode,
    RecommendationRequest,
)
from recipe_finder.recommendations.ranking import (
    ingredient_covers,
    ingredient_matches,
    rank_recipes,
)


def _recipe(
    recipe_id: str,
    *ingredients: str,
    cook_time: int = 30,
    difficulty: Difficulty = Difficulty.easy,
    dietary: tuple[str, ...] = (),
) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        cook_time=cook_time,
        difficulty=difficulty,
        dietary=dietary,
        ingredients=tuple(Ingredient(name=n) for n in ingredients),
    )


def _ids(matches) -> list[str]:
    return [m.recipe.id for m in matches]


# ── Matching primitive ───────────────────────────────────────────────────


def test_ingredient_matches_is_bidirectional_and_case_insensitive():
    assert ingredient_matches("Tomato Sauce", "tomato")
    assert ingredient_matches("Garlic", "GARLIC CLOVE")
    assert ingredient_matches("Onion", "onion")
    assert not ingredient_matches("Onion", "Garlic")


def test_ingredient_covers_ignores_contained_by():
    assert ingredient_covers("Tomato Sauce", "Tomato")
    assert not ingredient_covers("Garlic", "Garlic Clove")


# ── Inclusive mode ───────────────────────────────────────────────────────


def test_inclusive_empty_selection_returns_whole_catalog_unscored():
    catalog = get_recipes()

    matches = rank_recipes(RecommendationRequest())

    assert _ids(matches) == [r.id for r in catalog]
    assert all(m.match_score == 0 and m.matched_count == 0 for m in matches)


def test_inclusive_substring_match_scores_full_marks():
    recipes = [_recipe("a", "Tomato Sauce", "Basil"), _recipe("b", "Rice")]

    matches = rank_recipes(RecommendationRequest(ingredients=["Tomato"]), recipes)

    assert _ids(matches) == ["a"]
    assert matches[0].match_score == 100
    assert matches[0].matched_count == 1


def test_inclusive_partial_matches_score_proportionally():
    recipes = [
        _recipe("half", "Garlic", "Rice"),
        _recipe("full", "Garlic", "Onion"),
        _recipe("none", "Rice"),
    ]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic", "Onion"]), recipes
    )

    assert _ids(matches) == ["full", "half"]
    assert [m.match_score for m in matches] == [100, 50]
    assert [m.matched_count for m in matches] == [2, 1]


def test_inclusive_weighting_is_not_normalised_across_recipes():
    recipes = [_recipe("a", "Garlic", "Onion", "Carrot")]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic", "Onion", "Carrot"]), recipes
    )

    assert matches[0].match_score == pytest.approx(100)


def test_inclusive_dietary_filter_requires_every_tag():
    recipes = [
        _recipe("v", "Rice", dietary=("Vegetarian",)),
        _recipe("vg", "Rice", dietary=("Vegetarian", "Gluten-Free")),
        _recipe("g", "Rice", dietary=("Gluten-Free",)),
    ]

    matches = rank_recipes(
        RecommendationRequest(dietary=["Vegetarian", "Gluten-Free"]), recipes
    )

    assert _ids(matches) == ["vg"]


def test_inclusive_difficulty_filter():
    matches = rank_recipes(RecommendationRequest(difficulty=[Difficulty.hard]))

    assert matches
    assert all(m.recipe.difficulty == Difficulty.hard for m in matches)


def test_inclusive_cook_time_bounds_are_inclusive():
    recipes = [
        _recipe("zero", "Rice", cook_time=0),
        _recipe("max", "Rice", cook_time=180),
        _recipe("mid", "Rice", cook_time=90),
    ]

    wide = rank_recipes(
        RecommendationRequest(cook_time=CookTimeRange(min=0, max=180)), recipes
    )
    narrow = rank_recipes(
        RecommendationRequest(cook_time=CookTimeRange(min=1, max=179)), recipes
    )

    assert _ids(wide) == ["zero", "max", "mid"]
    assert _ids(narrow) == ["mid"]


def test_inclusive_without_selection_keeps_catalog_order_under_filters():
    matches = rank_recipes(RecommendationRequest(dietary=["Vegan"]))

    assert _ids(matches) == ["1", "11"]


def test_inclusive_sort_is_stable_for_ties():
    recipes = [_recipe(str(i), "Garlic") for i in range(5)]

    matches = rank_recipes(RecommendationRequest(ingredients=["Garlic"]), recipes)

    assert _ids(matches) == ["0", "1", "2", "3", "4"]


def test_request_deduplicates_selected_ingredients():
    request = RecommendationRequest(ingredients=["Garlic", " Garlic ", "Onion", ""])

    assert request.ingredients == ["Garlic", "Onion"]


# ── Exclusive mode ───────────────────────────────────────────────────────


def test_exclusive_empty_detection_keeps_everything():
    catalog = get_recipes()

    matches = rank_recipes(RecommendationRequest(mode=RankingMode.exclusive))

    assert _ids(matches) == [r.id for r in catalog]
    assert all(m.match_score == 0 and m.matched_count == 0 for m in matches)


def test_exclusive_requires_every_detected_ingredient():
    many = [f"Extra {i}" for i in range(10)]
    recipes = [
        _recipe("garlic-only", "Garlic", *many),
        _recipe("both", "Garlic", "Onion", "Olive Oil"),
    ]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic", "Onion"], mode=RankingMode.exclusive),
        recipes,
    )

    assert _ids(matches) == ["both"]


def test_exclusive_score_counts_additional_matches():
    recipes = [_recipe("r", "Garlic", "Onion", "Olive Oil")]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic", "Onion"], mode=RankingMode.exclusive),
        recipes,
    )

    assert matches[0].match_score == 110
    assert matches[0].matched_count == 2


def test_exclusive_score_can_exceed_base_with_corroborating_ingredients():
    recipes = [
        _recipe("plain", "Tomato", "Basil"),
        _recipe("rich", "Tomato", "Tomato Sauce", "Sun-Dried Tomato"),
    ]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Tomato"], mode=RankingMode.exclusive),
        recipes,
    )

    assert _ids(matches) == ["rich", "plain"]
    assert [m.match_score for m in matches] == [115, 105]
    assert [m.matched_count for m in matches] == [1, 1]


def test_exclusive_contained_by_includes_without_bonus():
    recipes = [_recipe("r", "Garlic")]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic Clove"], mode=RankingMode.exclusive),
        recipes,
    )

    assert _ids(matches) == ["r"]
    assert matches[0].match_score == 100


def test_exclusive_ties_keep_catalog_order():
    recipes = [_recipe("x", "Garlic"), _recipe("y", "Rice"), _recipe("z", "Garlic")]

    matches = rank_recipes(
        RecommendationRequest(ingredients=["Garlic"], mode=RankingMode.exclusive),
        recipes,
    )

    assert _ids(matches) == ["x", "z"]


def test_exclusive_ignores_filters():
    recipes = [_recipe("slow", "Garlic", cook_time=240, difficulty=Difficulty.hard)]

    matches = rank_recipes(
        RecommendationRequest(
            ingredients=["Garlic"],
            mode=RankingMode.exclusive,
            difficulty=[Difficulty.easy],
        ),
        recipes,
    )

    assert _ids(matches) == ["slow"]


# ── Shared properties ────────────────────────────────────────────────────


@pytest.mark.parametrize("mode", list(RankingMode))
def test_ranking_is_idempotent(mode):
    request = RecommendationRequest(ingredients=["Garlic", "Onion", "Rice"], mode=mode)

    first = [m.model_dump() for m in rank_recipes(request)]
    second = [m.model_dump() for m in rank_recipes(request)]

    assert first == second


def test_recipes_are_frozen():
    recipe = _recipe("r", "Garlic")

    with pytest.raises(ValidationError):
        recipe.cook_time = 5
