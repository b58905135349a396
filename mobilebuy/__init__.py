"""
Mobile Buy SDK

Modules:
    models         - Data models (Product, ProductVariant, Checkout, Cart, ...)
    serialization  - JSON decoding of storefront responses, checkout payloads
    catalog        - Product normalization and variant/image lookups
    common         - Shared utilities (config loader, logging, dates)
    errors         - Exception hierarchy
"""
