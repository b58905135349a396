"""
Product Decoder

Maps storefront product JSON onto the catalog models. Decoding converts
field names and dates only; variant back-links and the tag set are the
normalizer's job, so product_from_dict returns an un-normalized Product.

Accepted shapes:
    {"product_listing": {...}}          single product
    {"product_listings": [{...}, ...]}  product list
    bare product object or list
"""

import json
import logging
from typing import Any, List, Optional

from ..catalog.normalizer import normalize
from ..common.date_utils import DateParser, make_date_parser
from ..errors import MalformedDataError
from ..models import Image, Option, OptionValue, Product, ProductVariant
from .fields import get_bool, get_int, get_int_list, get_list, get_str, require_object

logger = logging.getLogger(__name__)

_default_date_parser = make_date_parser()


def _option_value_from_dict(data: Any) -> OptionValue:
    data = require_object(data, "option_value")
    return OptionValue(
        name=get_str(data, "name"),
        value=get_str(data, "value"),
        option_id=get_int(data, "option_id"),
    )


def _option_from_dict(data: Any) -> Option:
    data = require_object(data, "option")
    return Option(
        name=get_str(data, "name"),
        values=tuple(str(v) for v in get_list(data, "values")),
        id=get_int(data, "id"),
        position=get_int(data, "position", 0),
    )


def _image_from_dict(data: Any, parse_date: DateParser) -> Image:
    data = require_object(data, "image")
    return Image(
        id=get_int(data, "id"),
        src=get_str(data, "src"),
        variant_ids=tuple(get_int_list(data, "variant_ids")),
        position=get_int(data, "position", 0),
        created_at=parse_date(data.get("created_at")),
        updated_at=parse_date(data.get("updated_at")),
    )


def _variant_from_dict(data: Any, parse_date: DateParser) -> ProductVariant:
    data = require_object(data, "variant")
    return ProductVariant(
        id=get_int(data, "id"),
        title=get_str(data, "title"),
        option_values=tuple(_option_value_from_dict(v) for v in get_list(data, "option_values")),
        product_id=get_int(data, "product_id"),
        product_title=get_str(data, "product_title"),
        price=get_str(data, "price"),
        compare_at_price=get_str(data, "compare_at_price"),
        grams=get_int(data, "grams", 0),
        requires_shipping=get_bool(data, "requires_shipping", True),
        sku=get_str(data, "sku"),
        taxable=get_bool(data, "taxable", True),
        position=get_int(data, "position", 0),
        available=get_bool(data, "available", True),
        created_at=parse_date(data.get("created_at")),
        updated_at=parse_date(data.get("updated_at")),
    )


def product_from_dict(data: Any, date_parser: Optional[DateParser] = None) -> Product:
    """
    Decode one product object.

    Args:
        data: Parsed JSON object in the storefront product shape
        date_parser: Converts date strings to datetimes (defaults to the SDK format)

    Returns:
        Un-normalized Product (tag_set is None, variants not back-linked)

    Raises:
        MalformedDataError: If a field has the wrong JSON type or a date does not parse
    """
    data = require_object(data, "product")
    parse_date = date_parser or _default_date_parser

    return Product(
        product_id=get_str(data, "product_id", None),
        channel_id=get_str(data, "channel_id", None),
        title=get_str(data, "title"),
        handle=get_str(data, "handle"),
        body_html=get_str(data, "body_html"),
        published_at=parse_date(data.get("published_at")),
        created_at=parse_date(data.get("created_at")),
        updated_at=parse_date(data.get("updated_at")),
        vendor=get_str(data, "vendor"),
        product_type=get_str(data, "product_type"),
        tags=get_str(data, "tags", None),
        variants=tuple(_variant_from_dict(v, parse_date) for v in get_list(data, "variants")),
        images=tuple(_image_from_dict(i, parse_date) for i in get_list(data, "images")),
        options=tuple(_option_from_dict(o) for o in get_list(data, "options")),
        available=get_bool(data, "available"),
        published=get_bool(data, "published"),
    )


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDataError(f"Invalid JSON: {e}") from e


def product_from_json(text: str, date_parser: Optional[DateParser] = None) -> Product:
    """
    Decode and normalize a product from a JSON document.

    Accepts a bare product object or one wrapped in "product_listing".
    """
    data = _loads(text)
    if isinstance(data, dict) and "product_listing" in data:
        data = data["product_listing"]
    return normalize(product_from_dict(data, date_parser))


def products_from_json(text: str, date_parser: Optional[DateParser] = None) -> List[Product]:
    """
    Decode and normalize every product in a JSON document.

    Accepts {"product_listings": [...]}, {"product_listing": {...}},
    a bare list, or a bare product object.
    """
    data = _loads(text)

    if isinstance(data, dict):
        if "product_listings" in data:
            items = get_list(data, "product_listings")
        elif "product_listing" in data:
            items = [data["product_listing"]]
        else:
            items = [data]
    elif isinstance(data, list):
        items = data
    else:
        raise MalformedDataError(f"Expected a product object or list, got {type(data).__name__}")

    products = [normalize(product_from_dict(item, date_parser)) for item in items]
    logger.info("Decoded %d products", len(products))
    return products
