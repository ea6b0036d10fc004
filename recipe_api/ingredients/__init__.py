"""
Ingredient catalog operations.

Responsibilities:
- Filter the catalog by category and by name/alias substring.
- List the distinct ingredient categories.
- Look up substitutes for an ingredient.
- Validate free-text ingredient names and suggest close catalog entries.
"""
