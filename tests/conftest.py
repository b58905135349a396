"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from mobilebuy.models import Image, Option, OptionValue, Product, ProductVariant

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_variant(variant_id, *values, names=("Size", "Color")):
    """Build a variant whose option values follow the given names."""
    return ProductVariant(
        id=variant_id,
        title=" / ".join(values),
        option_values=[OptionValue(name=n, value=v) for n, v in zip(names, values)],
        price="10.00",
    )


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def product_json():
    """Load the product listing JSON fixture as text."""
    return (FIXTURES_DIR / "product.json").read_text(encoding="utf-8")


@pytest.fixture
def product_data(product_json):
    """Parsed product object (unwrapped from product_listing)."""
    return json.loads(product_json)["product_listing"]


@pytest.fixture
def checkout_json():
    """Load the checkout JSON fixture as text."""
    return (FIXTURES_DIR / "checkout.json").read_text(encoding="utf-8")


@pytest.fixture
def sized_product():
    """Product with Size/Color variants and one variant-specific image."""
    return Product(
        product_id="42",
        title="Test Tee",
        tags="Shirts",
        options=[
            Option(name="Size", values=["Small", "Large"]),
            Option(name="Color", values=["Red", "Blue"]),
        ],
        variants=[
            make_variant(1, "Small", "Red"),
            make_variant(2, "Small", "Blue"),
            make_variant(3, "Large", "Red"),
        ],
        images=[
            Image(id=1, src="https://cdn.example.com/tee.jpg", variant_ids=[]),
            Image(id=2, src="https://cdn.example.com/tee-blue.jpg", variant_ids=[2]),
        ],
    )


@pytest.fixture
def variant_factory():
    """Return make_variant for tests that build their own variants."""
    return make_variant
