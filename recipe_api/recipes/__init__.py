"""
Recipe operations.

Responsibilities:
- List recipes with dietary, time and difficulty filters.
- Look up a recipe by id.
- Match recipes against a list of ingredients on hand.
- Accept (and echo) recipe ratings.
"""
