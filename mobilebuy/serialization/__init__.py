"""
JSON decoding and encoding for storefront payloads.

Modules:
    fields          - Typed readers for parsed JSON values
    product_decoder - Product listings to catalog models
    checkout_codec  - Checkout decoding and request payload encoding
"""

from .checkout_codec import (
    checkout_from_dict,
    checkout_from_json,
    checkout_to_dict,
    marketing_attribution_to_dict,
)
from .product_decoder import product_from_dict, product_from_json, products_from_json

__all__ = [
    'product_from_dict',
    'product_from_json',
    'products_from_json',
    'checkout_from_dict',
    'checkout_from_json',
    'checkout_to_dict',
    'marketing_attribution_to_dict',
]
