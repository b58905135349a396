"""
Configuration Loader

Loads YAML configuration files for storefront settings: the date wire
format and the layout of the inspection report.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .constants import DATE_FORMAT

logger = logging.getLogger(__name__)

STOREFRONT_DEFAULTS: Dict[str, Any] = {
    'date_format': DATE_FORMAT,
    'report_width': 80,
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'storefront.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_storefront_settings(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge storefront overrides onto the built-in defaults.

    Unknown keys are kept so callers can carry their own settings;
    None values fall back to the default.
    """
    settings = dict(STOREFRONT_DEFAULTS)
    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value
    return settings


def load_storefront_settings() -> Dict[str, Any]:
    """
    Load storefront settings.

    Returns:
        Dictionary with date_format and report_width, read from
        storefront.yaml over the defaults. Falls back to the defaults when
        no config directory or storefront.yaml can be found.

    Example:
        {
            'date_format': '%Y-%m-%dT%H:%M:%S%z',
            'report_width': 80,
        }
    """
    try:
        config = load_config('storefront.yaml')
    except FileNotFoundError as e:
        logger.warning("%s; using default storefront settings", e)
        return merge_storefront_settings({})
    return merge_storefront_settings(config.get('storefront', {}))
