"""
Checkout Codec

Decodes checkouts returned by the storefront and encodes the payload the
app sends when creating or updating one. Encoding omits None fields and
always carries the mobile_app channel.
"""

import json
import logging
from dataclasses import fields, is_dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.constants import ATTRIBUTION_MEDIUM, DATE_FORMAT
from ..common.date_utils import DateParser, format_date, make_date_parser
from ..errors import MalformedDataError
from ..models import (
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
from .fields import get_bool, get_int, get_list, get_str, require_object

logger = logging.getLogger(__name__)

_default_date_parser = make_date_parser()


# ── Decoding ─────────────────────────────────────────────────────────────


def _optional(data: Dict[str, Any], key: str, decode) -> Any:
    value = data.get(key)
    if value is None:
        return None
    return decode(require_object(value, key))


def address_from_dict(data: Dict[str, Any]) -> Address:
    return Address(**{f.name: get_str(data, f.name) for f in fields(Address)})


def line_item_from_dict(data: Dict[str, Any]) -> LineItem:
    data = require_object(data, "line_item")
    properties = data.get("properties") or {}
    if not isinstance(properties, dict):
        raise MalformedDataError(f"properties: expected an object, got {type(properties).__name__}")

    return LineItem(
        variant_id=get_int(data, "variant_id"),
        quantity=get_int(data, "quantity", 1),
        id=get_str(data, "id", None),
        product_id=get_int(data, "product_id"),
        title=get_str(data, "title"),
        variant_title=get_str(data, "variant_title"),
        price=get_str(data, "price"),
        line_price=get_str(data, "line_price"),
        compare_at_price=get_str(data, "compare_at_price"),
        requires_shipping=get_bool(data, "requires_shipping", True),
        taxable=get_bool(data, "taxable", True),
        sku=get_str(data, "sku"),
        vendor=get_str(data, "vendor"),
        grams=get_int(data, "grams", 0),
        fulfillment_service=get_str(data, "fulfillment_service"),
        properties={str(k): str(v) for k, v in properties.items()},
    )


def shipping_rate_from_dict(data: Dict[str, Any], date_parser: Optional[DateParser] = None) -> ShippingRate:
    parse_date = date_parser or _default_date_parser
    data = require_object(data, "shipping_rate")
    return ShippingRate(
        id=get_str(data, "id"),
        title=get_str(data, "title"),
        price=get_str(data, "price"),
        delivery_range=[parse_date(d) for d in get_list(data, "delivery_range")],
    )


def gift_card_from_dict(data: Dict[str, Any]) -> GiftCard:
    data = require_object(data, "gift_card")
    return GiftCard(
        code=get_str(data, "code"),
        id=get_int(data, "id"),
        balance=get_str(data, "balance"),
        amount_used=get_str(data, "amount_used"),
        last_characters=get_str(data, "last_characters"),
    )


def _tax_line_from_dict(data: Any) -> TaxLine:
    data = require_object(data, "tax_line")
    return TaxLine(
        title=get_str(data, "title"),
        price=get_str(data, "price"),
        rate=get_str(data, "rate"),
    )


def _discount_from_dict(data: Dict[str, Any]) -> Discount:
    return Discount(
        code=get_str(data, "code"),
        amount=get_str(data, "amount"),
        applicable=get_bool(data, "applicable", None),
    )


def _credit_card_from_dict(data: Dict[str, Any]) -> CreditCard:
    return CreditCard(
        first_digits=get_str(data, "first_digits"),
        last_digits=get_str(data, "last_digits"),
        first_name=get_str(data, "first_name"),
        last_name=get_str(data, "last_name"),
        expiry_month=get_int(data, "expiry_month"),
        expiry_year=get_int(data, "expiry_year"),
    )


def _order_from_dict(data: Dict[str, Any]) -> Order:
    return Order(
        id=get_str(data, "id", None),
        name=get_str(data, "name"),
        status_url=get_str(data, "status_url"),
    )


def _marketing_attribution_from_dict(data: Dict[str, Any]) -> MarketingAttribution:
    return MarketingAttribution(
        source=get_str(data, "source"),
        medium=get_str(data, "medium", ATTRIBUTION_MEDIUM),
    )


def checkout_from_dict(data: Any, date_parser: Optional[DateParser] = None) -> Checkout:
    """
    Decode a checkout object.

    Args:
        data: Parsed JSON object in the storefront checkout shape
        date_parser: Converts date strings to datetimes (defaults to the SDK format)

    Raises:
        MalformedDataError: If a field has the wrong JSON type or a date does not parse
    """
    parse_date = date_parser or _default_date_parser
    data = require_object(data, "checkout")

    tax_lines = data.get("tax_lines")
    gift_cards = data.get("gift_cards")

    return Checkout(
        line_items=[line_item_from_dict(i) for i in get_list(data, "line_items")],
        email=get_str(data, "email", None),
        token=get_str(data, "token", None),
        order_id=get_int(data, "order_id"),
        order_status_url=get_str(data, "order_status_url", None),
        order=_optional(data, "order", _order_from_dict),
        requires_shipping=get_bool(data, "requires_shipping", None),
        taxes_included=get_bool(data, "taxes_included", None),
        currency=get_str(data, "currency", None),
        subtotal_price=get_str(data, "subtotal_price", None),
        total_tax=get_str(data, "total_tax", None),
        total_price=get_str(data, "total_price", None),
        payment_session_id=get_str(data, "payment_session_id", None),
        payment_url=get_str(data, "payment_url", None),
        payment_due=get_str(data, "payment_due", None),
        reservation_time=get_int(data, "reservation_time"),
        reservation_time_left=get_int(data, "reservation_time_left"),
        tax_lines=None if tax_lines is None else [_tax_line_from_dict(t) for t in get_list(data, "tax_lines")],
        discount=_optional(data, "discount", _discount_from_dict),
        billing_address=_optional(data, "billing_address", address_from_dict),
        shipping_address=_optional(data, "shipping_address", address_from_dict),
        shipping_rate=_optional(data, "shipping_rate", lambda d: shipping_rate_from_dict(d, parse_date)),
        shipping_rate_id=get_str(data, "shipping_rate_id", None),
        marketing_attribution=_optional(data, "marketing_attribution", _marketing_attribution_from_dict),
        gift_cards=None if gift_cards is None else [gift_card_from_dict(g) for g in get_list(data, "gift_cards")],
        credit_card=_optional(data, "credit_card", _credit_card_from_dict),
        channel_id=get_str(data, "channel_id", None),
        web_url=get_str(data, "web_url", None),
        web_return_to_url=get_str(data, "web_return_to_url", None),
        web_return_to_label=get_str(data, "web_return_to_label", None),
        created_at=parse_date(data.get("created_at")),
        customer_id=get_str(data, "customer_id", None),
        privacy_policy_url=get_str(data, "privacy_policy_url", None),
        refund_policy_url=get_str(data, "refund_policy_url", None),
        terms_of_service_url=get_str(data, "terms_of_service_url", None),
        source_name=get_str(data, "source_name", None),
        source_identifier=get_str(data, "source_identifier", None),
        note=get_str(data, "note", None),
    )


def checkout_from_json(text: str, date_parser: Optional[DateParser] = None) -> Checkout:
    """Decode a checkout from a JSON document, bare or wrapped in "checkout"."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDataError(f"Invalid JSON: {e}") from e

    if isinstance(data, dict) and "checkout" in data:
        data = data["checkout"]
    return checkout_from_dict(data, date_parser)


# ── Encoding ─────────────────────────────────────────────────────────────


def _encode(value: Any, date_format: str) -> Any:
    if is_dataclass(value):
        encoded = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is not None:
                encoded[f.name] = _encode(item, date_format)
        return encoded
    if isinstance(value, datetime):
        return format_date(value, date_format)
    if isinstance(value, (list, tuple)):
        return [_encode(v, date_format) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v, date_format) for k, v in value.items()}
    return value


def checkout_to_dict(checkout: Checkout, date_format: str = DATE_FORMAT) -> Dict[str, Any]:
    """
    Encode a checkout for a create/update request.

    None fields are left out; nested models are encoded the same way.

    Returns:
        {"checkout": {...}}
    """
    payload = _encode(checkout, date_format)
    logger.debug("Encoded checkout %s with %d line items",
                 checkout.token, len(checkout.line_items))
    return {"checkout": payload}


def marketing_attribution_to_dict(attribution: MarketingAttribution) -> Dict[str, Any]:
    """Encode marketing attribution as {"source": ..., "medium": ...}."""
    return _encode(attribution, DATE_FORMAT)
