"""
Cart data models.

A cart is built on the device from product variants before a checkout
exists. Prices stay strings as delivered by the storefront; totals are
computed with Decimal.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from .checkout import LineItem
from .product import ProductVariant


@dataclass
class CartLineItem:
    """Cart line holding the variant it was created from."""
    variant: ProductVariant
    quantity: int = 1

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")

    @property
    def line_price(self) -> Decimal:
        try:
            return Decimal(self.variant.price or "0") * self.quantity
        except InvalidOperation:
            raise ValueError(f"Variant {self.variant.id} has invalid price {self.variant.price!r}")


@dataclass
class Cart:
    """Ordered collection of cart lines, one per variant."""

    line_items: List[CartLineItem] = field(default_factory=list)

    def _find(self, variant: ProductVariant) -> Optional[CartLineItem]:
        for item in self.line_items:
            if item.variant.id == variant.id:
                return item
        return None

    def add_variant(self, variant: ProductVariant) -> CartLineItem:
        """Add one of the variant, creating its line if needed."""
        item = self._find(variant)
        if item is None:
            item = CartLineItem(variant=variant, quantity=1)
            self.line_items.append(item)
        else:
            item.quantity += 1
        return item

    def decrement_variant(self, variant: ProductVariant) -> Optional[CartLineItem]:
        """
        Remove one of the variant.

        Returns:
            The remaining line, or None if the line was removed or never existed
        """
        item = self._find(variant)
        if item is None:
            return None

        item.quantity -= 1
        if item.quantity <= 0:
            self.line_items.remove(item)
            return None
        return item

    def set_variant_quantity(self, variant: ProductVariant, quantity: int) -> None:
        """Set the quantity of a variant; zero removes its line."""
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")

        item = self._find(variant)
        if quantity == 0:
            if item is not None:
                self.line_items.remove(item)
        elif item is None:
            self.line_items.append(CartLineItem(variant=variant, quantity=quantity))
        else:
            item.quantity = quantity

    def clear(self) -> None:
        self.line_items.clear()

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_price for item in self.line_items), Decimal("0"))

    def to_line_items(self) -> List[LineItem]:
        """Checkout line items for the cart contents."""
        return [
            LineItem(
                variant_id=item.variant.id,
                quantity=item.quantity,
                product_id=item.variant.product_id,
                title=item.variant.product_title,
                variant_title=item.variant.title,
                price=item.variant.price,
                requires_shipping=item.variant.requires_shipping,
                taxable=item.variant.taxable,
                sku=item.variant.sku,
                grams=item.variant.grams,
            )
            for item in self.line_items
        ]
