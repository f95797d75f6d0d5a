"""
Folio configuration package.

Re-exports all public functions.
"""

from config.gallery_config import (
    DEFAULTS, DEFAULT_CONFIG_PATH,
    load_gallery_config, merge_defaults, resolve_config_path,
)
