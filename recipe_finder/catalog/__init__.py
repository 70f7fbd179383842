"""
Recipe catalog.

Responsibilities:
- Load the fixed recipe collection shipped with the package.
- Validate catalog invariants once, at load time.
- Serve read-only lookups (recipes, ingredient names, substitutions).
"""
