"""Service layer: conversions returning ServiceResult.

Services may import from domain and config layers.
"""
