"""
Folio scanning package.
"""

from scanning.scanner import (
    IMAGE_EXTENSIONS, ScannedImage,
    read_dir_safe, is_image_name, list_subdirectories, list_image_files,
    build_thumbnail_map, scan_images, newest_timestamp, read_json_safe,
)
