"""
Catalog Queries

Lookups over a normalized product: the image to show for a variant and
the variant selected by a list of option values.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..models import Image, OptionValue, Product, ProductVariant

logger = logging.getLogger(__name__)


def image_for_variant(product: Product, variant: ProductVariant) -> Image | None:
    """
    Find the image to display for a variant.

    Args:
        product: Normalized product
        variant: One of the product's variants (required)

    Returns:
        The first image listing the variant's id, otherwise the product's
        first image, or None if the product has no images

    Raises:
        ValueError: If variant is None
    """
    if variant is None:
        raise ValueError("variant cannot be None")

    if not product.images:
        return None

    for image in product.images:
        if variant.id in image.variant_ids:
            return image

    # First image is the product image, whatever variants it lists
    logger.debug("No image for variant %s, using product image", variant.id)
    return product.images[0]


def variant_for_option_values(
    product: Product,
    option_values: Sequence[OptionValue] | None,
) -> ProductVariant | None:
    """
    Find the variant selected by a list of option values.

    Values are compared position by position against each variant's
    option values; option names are not checked. The first variant whose
    values match at every position wins. An empty selection matches
    nothing.

    Args:
        product: Normalized product
        option_values: One value per product option, in option order

    Returns:
        The matching variant, or None
    """
    if option_values is None:
        return None

    num_options = len(option_values)
    for variant in product.variants:
        if len(variant.option_values) < num_options:
            continue

        for i in range(num_options):
            if variant.option_values[i].value != option_values[i].value:
                break
            elif i == num_options - 1:
                return variant

    return None


def variant_by_id(product: Product, variant_id: int) -> ProductVariant | None:
    """Find a variant of the product by its id."""
    for variant in product.variants:
        if variant.id == variant_id:
            return variant
    return None


def option_values_for(product: Product, values: Sequence[str]) -> list[OptionValue]:
    """
    Build a positional option selection from plain values.

    Value i is paired with the name of the product's option i; values past
    the last option keep an empty name.
    """
    selection = []
    for i, value in enumerate(values):
        option = product.options[i] if i < len(product.options) else None
        selection.append(OptionValue(
            name=option.name if option else "",
            value=value,
            option_id=option.id if option else None,
        ))
    return selection
