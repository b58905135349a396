"""
Data models for the storefront.

This module contains data classes with no I/O: catalog entities, the
checkout and its parts, and the on-device cart.
"""

from .cart import Cart, CartLineItem
from .checkout import (
    Address,
    Checkout,
    CreditCard,
    Discount,
    GiftCard,
    LineItem,
    MarketingAttribution,
    Order,
    ShippingRate,
    TaxLine,
)
from .product import Image, Option, OptionValue, Product, ProductVariant

__all__ = [
    # Catalog
    'Product',
    'ProductVariant',
    'Image',
    'Option',
    'OptionValue',
    # Checkout
    'Checkout',
    'LineItem',
    'Address',
    'ShippingRate',
    'GiftCard',
    'Discount',
    'TaxLine',
    'Order',
    'CreditCard',
    'MarketingAttribution',
    # Cart
    'Cart',
    'CartLineItem',
]
