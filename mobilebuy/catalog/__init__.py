"""
Catalog normalization and queries.

Modules:
    normalizer - Variant back-linking and tag set derivation
    queries    - Image-for-variant and variant-for-options lookups
"""

from .normalizer import normalize, parse_tags
from .queries import (
    image_for_variant,
    option_values_for,
    variant_by_id,
    variant_for_option_values,
)

__all__ = [
    'normalize',
    'parse_tags',
    'image_for_variant',
    'variant_for_option_values',
    'variant_by_id',
    'option_values_for',
]
