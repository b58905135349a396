# Common utilities
from .config_loader import (
    load_config,
    load_storefront_settings,
    merge_storefront_settings,
)
from .constants import (
    ATTRIBUTION_MEDIUM,
    CHECKOUT_CHANNEL,
    DATE_FORMAT,
    DEFAULT_VARIANT_TITLE,
)
from .date_utils import format_date, make_date_parser, parse_date
from .log_config import setup_logging
