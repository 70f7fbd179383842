from __future__ import annotations

import logging
from collections.abc import Collection

from .histogram import ColorHistogram

logger = logging.getLogger(__name__)

# Ingredient name -> declared color labels. Labels without a presence rule below
# (hex codes, "golden", "pink") never count as evidence.
INGREDIENT_PATTERNS: dict[str, tuple[str, ...]] = {
    "Potato": ("brown", "8b4513", "a0522d"),
    "Tomato": ("red", "ff0000", "ff4444"),
    "Chicken": ("yellow", "ffff00", "ffcc99"),
    "Broccoli": ("green", "00ff00", "228b22"),
    "Carrot": ("orange", "ff8c00", "ffa500"),
    "Garlic": ("white", "ffffff", "f5f5f5"),
    "Onion": ("yellow", "golden", "ff00ff"),
    "Lettuce": ("green", "00ff00", "90ee90"),
    "Cheese": ("yellow", "ffff00", "ffd700"),
    "Egg": ("white", "ffffff", "fffacd"),
    "Mushroom": ("brown", "8b4513", "d2691e"),
    "Spinach": ("green", "006400", "228b22"),
    "Pepper": ("red", "ff0000", "ff6347"),
    "Bell Peppers": ("red", "ff0000", "ff6347"),
    "OliveOil": ("golden", "ffd700", "daa520"),
    "Salmon": ("pink", "ff69b4", "ffb6c1"),
    "Rice": ("white", "ffffff", "f5f5dc"),
    "Pasta": ("yellow", "ffff00", "ffd700"),
    "Milk": ("white", "ffffff", "f0f8ff"),
    "Honey": ("golden", "ffd700", "daa520"),
    "Lemon": ("yellow", "ffff00", "ffd700"),
}

# Declared color -> buckets whose presence counts as evidence for it.
COLOR_EVIDENCE: dict[str, tuple[str, ...]] = {
    "red": ("red", "orange"),
    "green": ("green",),
    "orange": ("orange", "yellow"),
    "yellow": ("yellow",),
    "white": ("white",),
    "brown": ("brown",),
}


def _color_present(color: str, histogram: ColorHistogram) -> bool:
    return any(histogram.get(bucket, 0) > 0 for bucket in COLOR_EVIDENCE.get(color, ()))


def match_ingredients(
    histogram: ColorHistogram,
    catalog_ingredients: Collection[str],
    patterns: dict[str, tuple[str, ...]] | None = None,
) -> list[str]:
    """
    Return catalog ingredients whose color pattern is supported by ``histogram``.

    Names are compared exactly against ``catalog_ingredients``; table entries the
    catalog doesn't contain are skipped. The result follows table order. An empty
    list means nothing was detected.
    """
    table = INGREDIENT_PATTERNS if patterns is None else patterns
    try:
        available = set(catalog_ingredients)
        return [
            ingredient
            for ingredient, colors in table.items()
            if ingredient in available
            and any(_color_present(color, histogram) for color in colors)
        ]
    except (AttributeError, TypeError):
        logger.warning("Pattern matching failed, treating as no ingredients", exc_info=True)
        return []
