"""
Recipe Recommender API.

Responsibilities:
- Load the static recipe and ingredient collections.
- Search, filter and validate ingredients.
- Match recipes against the ingredients a user has on hand.
- Score and bucket recipe recommendations.
"""
