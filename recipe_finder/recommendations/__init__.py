"""
Recipe matching and ranking.

Responsibilities:
- Accept selected or detected ingredients plus dietary, difficulty, and cook-time filters.
- Score catalog recipes with one of two ranking strategies.
- Filter and order candidates deterministically.
- Return structured matches ready for API serialisation.
"""
