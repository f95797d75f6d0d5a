"""
Folio maintenance package.
"""

from maintenance.featured_sets import (
    ThumbnailSettings, ensure_layout, move_loose_images, generate_thumbnails,
    process_category_root, process_set, process_category, process_all,
)
