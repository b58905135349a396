"""
Exceptions raised by the SDK.
"""


class MobileBuyError(Exception):
    """Base class for all SDK errors."""


class MalformedDataError(MobileBuyError, ValueError):
    """Storefront data that cannot be turned into a consistent entity."""
