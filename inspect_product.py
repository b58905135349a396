#!/usr/bin/env python3
"""
Product Inspection

Loads a storefront product listing JSON document, normalizes it and
prints a report. Optionally resolves the variant for a set of option
values and the image shown for it.

Usage:
    python3 inspect_product.py --file product.json
    python3 inspect_product.py --file product.json --option Small --option Blue
    python3 inspect_product.py --file product.json --variant-id 1002 --verbose --log-file inspect.log
"""

import argparse
import logging
import sys

from mobilebuy.catalog import (
    image_for_variant,
    option_values_for,
    variant_by_id,
    variant_for_option_values,
)
from mobilebuy.common import format_date, load_storefront_settings, make_date_parser, setup_logging
from mobilebuy.errors import MalformedDataError
from mobilebuy.models import Product, ProductVariant
from mobilebuy.serialization import product_from_json

logger = logging.getLogger("mobilebuy.inspect_product")


def print_report(product: Product, date_format: str, width: int = 80):
    """Print product summary report."""

    print("\n" + "=" * width)
    print("PRODUCT REPORT")
    print("=" * width)

    print(f"\nTitle: {product.title[:70]}..." if len(product.title) > 70 else f"\nTitle: {product.title}")

    fields = [
        ("Product ID", product.product_id),
        ("Handle", product.handle),
        ("Vendor", product.vendor),
        ("Product Type", product.product_type),
        ("Published At", format_date(product.published_at, date_format)),
        ("Updated At", format_date(product.updated_at, date_format)),
    ]
    for label, value in fields:
        status = "OK" if value else "MISSING"
        print(f"  [{status:7}] {label:20} {value or 'MISSING'}")

    print(f"\n  Available: {'yes' if product.available else 'no'}    "
          f"Published: {'yes' if product.published else 'no'}")

    print(f"\nTAGS ({len(product.tag_set)} items):")
    for idx, tag in enumerate(sorted(product.tag_set), 1):
        print(f"  {idx}. {tag}")

    print(f"\nOPTIONS ({len(product.options)} options):")
    for option in product.options:
        print(f"  {option.name}: {', '.join(option.values)}")

    default_note = " - default variant only" if product.has_default_variant else ""
    print(f"\nVARIANTS ({len(product.variants)} variants{default_note}):")
    for variant in product.variants:
        values = " / ".join(v.value for v in variant.option_values)
        print(f"  {variant.id}  {variant.title:30} {variant.price:>10}  {values}")

    print(f"\nIMAGES ({len(product.images)} images):")
    for img in product.images:
        url_short = img.src.split('/')[-1] if '/' in img.src else img.src
        applies_to = ", ".join(str(v) for v in img.variant_ids) or "product"
        print(f"  {img.id}. {url_short} ({applies_to})")


def print_selection(product: Product, variant: ProductVariant, width: int = 80):
    """Print the resolved variant and its image."""
    image = image_for_variant(product, variant)

    print("\n" + "-" * width)
    print("SELECTION")
    print("-" * width)
    print(f"\n  Variant: {variant.id} {variant.title}")
    print(f"  Price:   {variant.price}")
    print(f"  Image:   {image.src if image else 'none'}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect a storefront product listing"
    )
    parser.add_argument(
        "--file",
        required=True,
        help="Path to product listing JSON"
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        help="Option value to select, in option order (repeatable)"
    )
    parser.add_argument(
        "--variant-id",
        type=int,
        help="Select a variant by id instead of option values"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    settings = load_storefront_settings()
    date_format = settings['date_format']

    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            product = product_from_json(f.read(), make_date_parser(date_format))
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1
    except MalformedDataError as e:
        logger.error("Malformed product data: %s", e)
        return 1

    width = int(settings["report_width"])
    print_report(product, date_format, width)

    variant = None
    if args.variant_id is not None:
        variant = variant_by_id(product, args.variant_id)
        if variant is None:
            logger.error("No variant with id %d", args.variant_id)
            return 1
    elif args.option:
        variant = variant_for_option_values(product, option_values_for(product, args.option))
        if variant is None:
            logger.error("No variant matches options: %s", " / ".join(args.option))
            return 1

    if variant is not None:
        print_selection(product, variant, width)

    print("\n" + "=" * width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
