"""
Static catalog access.

Responsibilities:
- Read the recipe and ingredient JSON collections from the data directory.
- Degrade to an empty collection when a file is missing or corrupt.
- Optionally serve repeat reads from a cache keyed by file modification time.
"""
