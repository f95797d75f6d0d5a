"""
Folio showcase package.

Home page selection of featured sets and the loaders behind it.
"""

from showcase.models import CoverImage, ShowcaseCandidate, HomeShowcaseItem, SetView
from showcase.selector import (
    COSPLAY, CORPORATE, DEFAULT_LIMIT,
    normalise_sets, recency_key, select_for_home,
)
from showcase.items import build_set_gallery_url, build_descriptor, build_showcase_items
from showcase.loader import (
    SET_TYPES, run_sync, featured_manifest_path,
    load_featured_sets, load_category_images, load_home_items,
    resolve_set, load_set_view,
)
