"""Tests for mobilebuy/catalog/queries.py"""

import pytest

from mobilebuy.catalog import normalize
from mobilebuy.catalog.queries import (
    image_for_variant,
    option_values_for,
    variant_by_id,
    variant_for_option_values,
)
from mobilebuy.models import Image, OptionValue, Product, ProductVariant


def values(*vals):
    return [OptionValue(name="", value=v) for v in vals]


class TestImageForVariant:
    @pytest.fixture
    def product(self):
        return Product(
            product_id="1",
            images=[
                Image(id=1, src="a.jpg", variant_ids=[]),
                Image(id=2, src="b.jpg", variant_ids=[99]),
            ],
        )

    def test_returns_image_listing_variant(self, product):
        assert image_for_variant(product, ProductVariant(id=99)).id == 2

    def test_unreferenced_variant_falls_back_to_first(self, product):
        assert image_for_variant(product, ProductVariant(id=5)).id == 1

    def test_no_images_returns_none(self):
        assert image_for_variant(Product(product_id="1"), ProductVariant(id=5)) is None

    def test_fallback_ignores_first_image_associations(self):
        product = Product(
            product_id="1",
            images=[
                Image(id=1, src="a.jpg", variant_ids=[10]),
                Image(id=2, src="b.jpg", variant_ids=[20]),
            ],
        )
        assert image_for_variant(product, ProductVariant(id=30)).id == 1

    def test_images_without_variants_fall_back(self):
        product = Product(
            product_id="1",
            images=[Image(id=7, src="a.jpg"), Image(id=8, src="b.jpg")],
        )
        assert image_for_variant(product, ProductVariant(id=1)).id == 7

    def test_first_listing_image_wins(self):
        product = Product(
            product_id="1",
            images=[
                Image(id=1, src="a.jpg"),
                Image(id=2, src="b.jpg", variant_ids=[5]),
                Image(id=3, src="c.jpg", variant_ids=[5]),
            ],
        )
        assert image_for_variant(product, ProductVariant(id=5)).id == 2

    def test_none_variant_raises(self, product):
        with pytest.raises(ValueError, match="variant"):
            image_for_variant(product, None)

    def test_none_variant_raises_even_without_images(self):
        with pytest.raises(ValueError):
            image_for_variant(Product(product_id="1"), None)


class TestVariantForOptionValues:
    def test_finds_matching_variant(self, sized_product):
        product = normalize(sized_product)
        variant = variant_for_option_values(product, values("Small", "Blue"))
        assert variant.id == 2

    def test_first_match_wins(self, variant_factory):
        product = Product(
            product_id="1",
            variants=[variant_factory(1, "Small", "Red"), variant_factory(2, "Small", "Red")],
        )
        assert variant_for_option_values(product, values("Small", "Red")).id == 1

    def test_no_match_returns_none(self, sized_product):
        assert variant_for_option_values(sized_product, values("Large", "Green")) is None

    def test_none_query_returns_none(self, sized_product):
        assert variant_for_option_values(sized_product, None) is None

    def test_empty_query_returns_none(self, sized_product):
        assert variant_for_option_values(sized_product, []) is None

    def test_empty_query_on_single_variant_returns_none(self):
        product = Product(product_id="1", variants=[ProductVariant(id=1, title="Default Title")])
        assert variant_for_option_values(product, []) is None

    def test_option_names_not_checked(self, sized_product):
        query = [OptionValue(name="Material", value="Large"), OptionValue(name="Fit", value="Red")]
        assert variant_for_option_values(sized_product, query).id == 3

    def test_shorter_query_matches_prefix(self, sized_product):
        assert variant_for_option_values(sized_product, values("Large")).id == 3

    def test_variant_with_fewer_values_is_skipped(self, variant_factory):
        product = Product(
            product_id="1",
            variants=[variant_factory(1, "Small"), variant_factory(2, "Small", "Red")],
        )
        assert variant_for_option_values(product, values("Small", "Red")).id == 2


class TestVariantById:
    def test_found(self, sized_product):
        assert variant_by_id(sized_product, 3).title == "Large / Red"

    def test_missing(self, sized_product):
        assert variant_by_id(sized_product, 99) is None


class TestOptionValuesFor:
    def test_pairs_with_option_names(self, sized_product):
        selection = option_values_for(sized_product, ["Small", "Blue"])
        assert [(v.name, v.value) for v in selection] == [("Size", "Small"), ("Color", "Blue")]

    def test_extra_values_have_no_name(self, sized_product):
        selection = option_values_for(sized_product, ["Small", "Blue", "Cotton"])
        assert selection[2].name == ""
        assert selection[2].value == "Cotton"

    def test_round_trip_through_lookup(self, sized_product):
        selection = option_values_for(sized_product, ["Large", "Red"])
        assert variant_for_option_values(sized_product, selection).id == 3
