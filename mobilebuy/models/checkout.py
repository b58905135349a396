"""
Checkout data models.

The checkout is the object an app builds up (email, addresses, shipping
rate, discount, gift cards) and sends back to the storefront for each
update. Unlike catalog entities these are mutable.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Dict, List, Optional

from ..common.constants import ATTRIBUTION_MEDIUM, CHECKOUT_CHANNEL

if TYPE_CHECKING:
    from .cart import Cart


@dataclass
class Address:
    """Mailing address."""
    address1: str = ""
    address2: str = ""
    city: str = ""
    company: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    country: str = ""
    country_code: str = ""
    province: str = ""
    province_code: str = ""
    zip: str = ""


@dataclass
class LineItem:
    """Line item of a checkout (no embedded variant, unlike a cart line)."""
    variant_id: Optional[int]
    quantity: int = 1
    id: Optional[str] = None
    product_id: Optional[int] = None
    title: str = ""
    variant_title: str = ""
    price: str = ""
    line_price: str = ""
    compare_at_price: str = ""
    requires_shipping: bool = True
    taxable: bool = True
    sku: str = ""
    vendor: str = ""
    grams: int = 0
    fulfillment_service: str = ""
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class TaxLine:
    title: str = ""
    price: str = ""
    rate: str = ""


@dataclass
class Discount:
    """Discount applied by code; amount and applicable are filled in by the server."""
    code: str
    amount: str = ""
    applicable: Optional[bool] = None


@dataclass
class ShippingRate:
    id: str
    title: str = ""
    price: str = ""
    delivery_range: List[datetime] = field(default_factory=list)


@dataclass
class GiftCard:
    code: str = ""
    id: Optional[int] = None
    balance: str = ""
    amount_used: str = ""
    last_characters: str = ""


@dataclass
class CreditCard:
    """Masked card stored on a completed checkout."""
    first_digits: str = ""
    last_digits: str = ""
    first_name: str = ""
    last_name: str = ""
    expiry_month: Optional[int] = None
    expiry_year: Optional[int] = None


@dataclass
class Order:
    id: Optional[str] = None
    name: str = ""
    status_url: str = ""


@dataclass
class MarketingAttribution:
    """Identifies the app a checkout came from."""
    source: str
    medium: str = ATTRIBUTION_MEDIUM


@dataclass
class Checkout:
    """
    The checkout object.

    After changing a checkout through any of its setters it has to be sent
    back to the storefront for the change to take effect. order_id and
    order_status_url are deprecated in favour of order.
    """

    line_items: List[LineItem] = field(default_factory=list)
    email: Optional[str] = None
    token: Optional[str] = None

    # Deprecated, use order
    order_id: Optional[int] = None
    order_status_url: Optional[str] = None
    order: Optional[Order] = None

    requires_shipping: Optional[bool] = None
    taxes_included: Optional[bool] = None
    currency: Optional[str] = None
    subtotal_price: Optional[str] = None
    total_tax: Optional[str] = None
    total_price: Optional[str] = None

    payment_session_id: Optional[str] = None
    payment_url: Optional[str] = None
    payment_due: Optional[str] = None

    # Seconds; setting 0 and updating releases reserved inventory
    reservation_time: Optional[int] = None
    reservation_time_left: Optional[int] = None

    tax_lines: Optional[List[TaxLine]] = None
    discount: Optional[Discount] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    shipping_rate: Optional[ShippingRate] = None
    shipping_rate_id: Optional[str] = None
    marketing_attribution: Optional[MarketingAttribution] = None
    gift_cards: Optional[List[GiftCard]] = None
    credit_card: Optional[CreditCard] = None

    channel_id: Optional[str] = None
    web_url: Optional[str] = None
    web_return_to_url: Optional[str] = None
    web_return_to_label: Optional[str] = None

    created_at: Optional[datetime] = None
    customer_id: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    refund_policy_url: Optional[str] = None
    terms_of_service_url: Optional[str] = None
    source_name: Optional[str] = None
    source_identifier: Optional[str] = None
    note: Optional[str] = None

    channel: str = field(default=CHECKOUT_CHANNEL, init=False)

    @classmethod
    def from_cart(cls, cart: "Cart") -> "Checkout":
        """Start a checkout from the contents of a cart."""
        return cls(line_items=cart.to_line_items())

    def set_shipping_rate(self, shipping_rate: ShippingRate) -> None:
        self.shipping_rate = shipping_rate
        self.shipping_rate_id = shipping_rate.id

    def set_discount_code(self, code: str) -> None:
        self.discount = Discount(code=code)

    def add_gift_card(self, gift_card: Optional[GiftCard]) -> None:
        """Record a gift card the server has applied to this checkout."""
        if self.gift_cards is None:
            self.gift_cards = []

        if gift_card is not None:
            self.gift_cards.append(gift_card)

    def remove_gift_card(self, gift_card: Optional[GiftCard]) -> None:
        if self.gift_cards is not None and gift_card is not None and gift_card in self.gift_cards:
            self.gift_cards.remove(gift_card)
