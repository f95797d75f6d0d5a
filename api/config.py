"""
Configuration loading for the preview API server.

"""

import os

from fastapi import Request

from config import load_gallery_config, resolve_config_path

# Optional override of the gallery_config.json location
CONFIG_ENV_VAR = 'FOLIO_CONFIG'


def load_api_config(config_path=None):
    """Load gallery config for the API, honouring FOLIO_CONFIG."""
    return load_gallery_config(config_path or os.environ.get(CONFIG_ENV_VAR) or None)


def get_gallery_config(request: Request) -> dict:
    return request.app.state.gallery_config


def get_images_dir(request: Request) -> str:
    return resolve_config_path(request.app.state.gallery_config, 'images_dir')
