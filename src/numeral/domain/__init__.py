"""Domain layer: pure numeral conversions and their error types.

This layer depends only on stdlib and ``regex``.
It must never import from services or config.
"""
