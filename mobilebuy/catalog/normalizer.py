"""
Product Normalizer

Turns a decoded product into its normalized form:
1. Back-link every variant to the product's id and title
2. Derive the tag set from the comma-separated tag string
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from ..errors import MalformedDataError
from ..models import Product

logger = logging.getLogger(__name__)

_PRODUCT_ID = re.compile(r"[+-]?[0-9]+")
_LONG_MIN = -2 ** 63
_LONG_MAX = 2 ** 63 - 1


def parse_tags(tags: str | None) -> frozenset[str]:
    """
    Split a comma-separated tag string into a set of tags.

    Tokens are trimmed and empty tokens dropped. Matching is
    case-sensitive, so "Red" and "red" are different tags.

    Example:
        "Shoes, red , , blue" -> {"Shoes", "red", "blue"}
    """
    if not tags or not tags.strip():
        return frozenset()

    return frozenset(t.strip() for t in tags.split(',') if t.strip())


def _parse_product_id(product: Product) -> int:
    """Product id as a signed 64-bit integer: ASCII digits with an optional sign only."""
    product_id = product.product_id
    if isinstance(product_id, str) and _PRODUCT_ID.fullmatch(product_id):
        value = int(product_id)
        if _LONG_MIN <= value <= _LONG_MAX:
            return value

    logger.error("Product %r has variants but no numeric id", product_id)
    raise MalformedDataError(
        f"Product id must be a 64-bit integer to link variants (got {product_id!r})"
    )


def normalize(product: Product) -> Product:
    """
    Normalize a decoded product.

    Args:
        product: Product as produced by the decoding layer

    Returns:
        New Product with back-linked variants and a non-None tag_set

    Raises:
        MalformedDataError: If the product has variants and its id is not an integer
    """
    variants = tuple(product.variants)
    if variants:
        product_id = _parse_product_id(product)
        variants = tuple(
            replace(v, product_id=product_id, product_title=product.title)
            for v in variants
        )
        logger.debug("Linked %d variants to product %d", len(variants), product_id)

    tag_set = parse_tags(product.tags)
    logger.debug("Product %s: %d tags", product.product_id, len(tag_set))

    return replace(product, variants=variants, tag_set=tag_set)
