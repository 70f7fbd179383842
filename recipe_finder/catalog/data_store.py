from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import CatalogInvariantViolation
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Recipe

logger = logging.getLogger(__name__)

_recipes: tuple[Recipe, ...] | None = None
_ingredients: list[str] | None = None


def load_catalog(path: Path) -> tuple[Recipe, ...]:
    """Parse and validate a catalog file. Raises on duplicate recipe ids."""
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)

    recipes = tuple(Recipe.model_validate(item) for item in raw["recipes"])

    seen: set[str] = set()
    for recipe in recipes:
        if recipe.id in seen:
            raise CatalogInvariantViolation(f"Duplicate recipe id: {recipe.id!r}")
        seen.add(recipe.id)

    for recipe in recipes:
        names = {ing.name for ing in recipe.ingredients}
        unknown = set(recipe.substitutions) - names
        if unknown:
            raise CatalogInvariantViolation(
                f"Recipe {recipe.id!r} lists substitutions for unknown ingredients: "
                f"{', '.join(sorted(unknown))}"
            )

    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return recipes


def get_recipes(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Recipe, ...]:
    """Return the catalog in authored order, loading it on first call."""
    global _recipes
    if _recipes is None:
        _recipes = load_catalog(config.catalog_path)
    return _recipes


def get_all_ingredients() -> list[str]:
    """Union of ingredient names across all recipes, deduplicated as authored."""
    global _ingredients
    if _ingredients is None:
        names: dict[str, None] = {}
        for recipe in get_recipes():
            for ing in recipe.ingredients:
                names.setdefault(ing.name, None)
        _ingredients = list(names)
    return _ingredients


def get_recipe(recipe_id: str) -> Recipe | None:
    for recipe in get_recipes():
        if recipe.id == recipe_id:
            return recipe
    return None


def get_substitutions(recipe: Recipe, ingredient_name: str) -> tuple[str, ...]:
    return recipe.substitutions.get(ingredient_name, ())


def suggest_ingredients(query: str, exclude: list[str] | None = None) -> list[str]:
    """Catalog ingredient names containing ``query`` that aren't already selected."""
    needle = query.strip().lower()
    excluded = set(exclude or [])
    return [
        name for name in get_all_ingredients()
        if needle in name.lower() and name not in excluded
    ]


def reset_catalog() -> None:
    global _recipes, _ingredients
    _recipes = None
    _ingredients = None
