"""
Recipe ranking strategies.

Two policies share one substring-matching primitive:

* ``inclusive`` (typed search): every selected ingredient a recipe contains adds
  ``100 / len(selected)`` to its score. Recipes matching nothing are dropped
  only when something was selected. Dietary, difficulty, and cook-time filters
  apply.
* ``exclusive`` (photo search): a recipe must cover every detected ingredient.
  Survivors score ``100 + 5 * additional_matches``.

Both are pure: they read the recipes and the request and nothing else.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

from ..catalog.data_store import get_recipes
from ..catalog.models import Recipe
from .models import RankingMode, RecipeMatch, RecommendationRequest

EXCLUSIVE_BASE_SCORE = 100
EXCLUSIVE_BONUS_PER_MATCH = 5


def ingredient_matches(recipe_ingredient: str, query: str) -> bool:
    """Case-insensitive equal, contains, or contained-by."""
    a = recipe_ingredient.lower()
    b = query.lower()
    return a == b or b in a or a in b


def ingredient_covers(recipe_ingredient: str, query: str) -> bool:
    """Case-insensitive equal or contains (the recipe name holds the query)."""
    a = recipe_ingredient.lower()
    b = query.lower()
    return a == b or b in a


def recipe_has(recipe: Recipe, query: str) -> bool:
    return any(ingredient_matches(ing.name, query) for ing in recipe.ingredients)


def passes_filters(recipe: Recipe, request: RecommendationRequest) -> bool:
    if request.dietary and not all(tag in recipe.dietary for tag in request.dietary):
        return False
    if request.difficulty and recipe.difficulty not in request.difficulty:
        return False
    if not request.cook_time.min <= recipe.cook_time <= request.cook_time.max:
        return False
    return True


def _rank_inclusive(
    recipes: Sequence[Recipe], request: RecommendationRequest
) -> list[RecipeMatch]:
    selected = request.ingredients
    weight = 100 / len(selected) if selected else 0.0

    matches: list[RecipeMatch] = []
    for recipe in recipes:
        score = 0.0
        matched = 0
        for name in selected:
            if recipe_has(recipe, name):
                matched += 1
                score += weight

        if selected and matched == 0:
            continue
        if not passes_filters(recipe, request):
            continue
        matches.append(RecipeMatch(recipe=recipe, match_score=score, matched_count=matched))

    if selected:
        matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches


def _rank_exclusive(
    recipes: Sequence[Recipe], request: RecommendationRequest
) -> list[RecipeMatch]:
    detected = request.ingredients
    if not detected:
        return [RecipeMatch(recipe=r, match_score=0, matched_count=0) for r in recipes]

    matches: list[RecipeMatch] = []
    for recipe in recipes:
        if not all(recipe_has(recipe, name) for name in detected):
            continue
        additional = sum(
            1
            for ing in recipe.ingredients
            for name in detected
            if ingredient_covers(ing.name, name)
        )
        score = EXCLUSIVE_BASE_SCORE + additional * EXCLUSIVE_BONUS_PER_MATCH
        matches.append(
            RecipeMatch(recipe=recipe, match_score=score, matched_count=len(detected))
        )

    # list.sort is stable, so ties keep catalog order
    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches


RANKING_STRATEGIES: dict[
    RankingMode, Callable[[Sequence[Recipe], RecommendationRequest], list[RecipeMatch]]
] = {
    RankingMode.inclusive: _rank_inclusive,
    RankingMode.exclusive: _rank_exclusive,
}


def rank_recipes(
    request: RecommendationRequest,
    recipes: Sequence[Recipe] | None = None,
) -> list[RecipeMatch]:
    """Score, filter, and order ``recipes`` (the catalog by default) for ``request``."""
    if recipes is None:
        recipes = get_recipes()
    return RANKING_STRATEGIES[request.mode](recipes, request)
