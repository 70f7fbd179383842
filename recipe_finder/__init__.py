"""
Recipe Finder service.

Suggests recipes from typed ingredient names or from a photo of ingredients.
"""
