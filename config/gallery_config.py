"""
Folio gallery configuration.

Loads gallery_config.json and fills any missing settings from DEFAULTS.
"""

import copy
import json
import os

# Project root holds the default gallery_config.json
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(_PROJECT_ROOT, 'gallery_config.json')

DEFAULTS = {
    'images_dir': 'images',
    'site_root': '.',
    'url_prefix': '/images',
    'image_extensions': ['.jpg', '.jpeg', '.png', '.webp', '.avif'],
    'extra_title_patterns': {},
    'thumbnails': {
        'target_edge_px': 1100,
        'jpeg_quality': 82,
        'webp_quality': 82,
    },
    'showcase': {
        'limit': 6,
        'set_gallery_path': '/set-gallery',
    },
    'fallbacks': {
        'home': [],
        'sets': {'cosplay': [], 'corporate': []},
    },
}


def merge_defaults(config, defaults):
    """Fill keys missing from config with defaults, recursing into dicts.

    Values already present in config are kept as-is.
    """
    result = dict(config)
    for key, value in defaults.items():
        if key not in result:
            result[key] = copy.deepcopy(value)
        elif isinstance(value, dict) and isinstance(result[key], dict):
            result[key] = merge_defaults(result[key], value)
    return result


def load_gallery_config(config_path=None):
    """Load gallery settings, merging defaults with the config file.

    With no path, the project's gallery_config.json is used when present and
    the defaults otherwise. An explicit path must exist and parse.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the config file can't be parsed as a JSON object
    """
    explicit = config_path is not None
    config_path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = {}
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            raise ValueError(f"Could not load config from {config_path}: {e}")
        if not isinstance(config, dict):
            raise ValueError(f"Config file {config_path} must contain a JSON object")

    config = merge_defaults(config, DEFAULTS)
    config['_config_dir'] = os.path.dirname(os.path.abspath(config_path))
    return config


def resolve_config_path(config, key):
    """Resolve a path setting relative to the directory of its config file."""
    value = config.get(key) or DEFAULTS.get(key, '.')
    if os.path.isabs(value):
        return value
    base = config.get('_config_dir', _PROJECT_ROOT)
    return os.path.normpath(os.path.join(base, value))
