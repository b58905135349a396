"""
Product data models.

Catalog entities as delivered by the storefront product listings API.
Instances are frozen: normalization builds new ones instead of mutating.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import FrozenSet, Optional, Tuple

from ..common.constants import DEFAULT_VARIANT_TITLE


def _freeze(instance, *names):
    """Store collection fields as tuples so entities stay immutable and hashable."""
    for name in names:
        object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True)
class OptionValue:
    """One selected value for the option at the same position."""
    name: str
    value: str
    option_id: Optional[int] = None


@dataclass(frozen=True)
class Option:
    """A product option (e.g. Size) and its possible values."""
    name: str
    values: Tuple[str, ...] = ()
    id: Optional[int] = None
    position: int = 0

    def __post_init__(self):
        _freeze(self, "values")


@dataclass(frozen=True)
class Image:
    """
    Product image.

    An empty variant_ids tuple marks a product-level image, not an image
    that applies to no variant.
    """
    id: Optional[int]
    src: str
    variant_ids: Tuple[int, ...] = ()
    position: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        _freeze(self, "variant_ids")


@dataclass(frozen=True)
class ProductVariant:
    """
    Product variant data.

    product_id and product_title are a copy of the owning product's
    identity, filled in by normalization. option_values is positional:
    entry i selects a value for the product's option i.
    """
    id: Optional[int]
    title: str = ""
    option_values: Tuple[OptionValue, ...] = ()
    product_id: Optional[int] = None
    product_title: str = ""
    price: str = ""
    compare_at_price: str = ""
    grams: int = 0
    requires_shipping: bool = True
    sku: str = ""
    taxable: bool = True
    position: int = 0
    available: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        _freeze(self, "option_values")


@dataclass(frozen=True)
class Product:
    """
    An individual item for sale in a store.

    Field Groups:
    - Identity: product_id (string on the wire), channel_id, handle
    - Content: title, body_html, vendor, product_type
    - Dates: published_at, created_at, updated_at (always datetimes)
    - Tags: raw comma-separated string and the derived tag_set
    - Children: variants, images, options (owned, ordered tuples)
    - Flags: available, published

    tag_set is None until the product is normalized, then always a
    (possibly empty) frozenset.
    """

    product_id: Optional[str]
    title: str = ""
    channel_id: Optional[str] = None
    handle: str = ""
    body_html: str = ""

    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    vendor: str = ""
    product_type: str = ""

    tags: Optional[str] = None
    tag_set: Optional[FrozenSet[str]] = None

    variants: Tuple[ProductVariant, ...] = ()
    images: Tuple[Image, ...] = ()
    options: Tuple[Option, ...] = ()

    available: bool = False
    published: bool = False

    def __post_init__(self):
        _freeze(self, "variants", "images", "options")
        if self.tag_set is not None:
            object.__setattr__(self, "tag_set", frozenset(self.tag_set))

    @property
    def has_image(self) -> bool:
        """True if the product has at least one image."""
        return bool(self.images)

    @property
    def has_default_variant(self) -> bool:
        """True if the only variant is the one the storefront creates for option-less products."""
        return len(self.variants) == 1 and self.variants[0].title == DEFAULT_VARIANT_TITLE
