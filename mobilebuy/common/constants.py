"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Wire format for every date the storefront API sends or accepts,
# e.g. 2015-05-13T11:34:25-04:00
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Title the storefront gives the only variant of a product without options
DEFAULT_VARIANT_TITLE = "Default Title"

# Sales channel every checkout created by the SDK is attributed to
CHECKOUT_CHANNEL = "mobile_app"

# Platform reported in marketing attribution
ATTRIBUTION_MEDIUM = "android"
