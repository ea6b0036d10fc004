"""
Recipe recommendation engine.

Responsibilities:
- Accept what the user has on hand and their preferences.
- Score every recipe with a fixed seven-factor weighting.
- Drop infeasible recipes and bucket the rest by quality.
- Rank popular and quick recipes for the discovery listings.
"""
