"""
Projection of selected featured sets into home showcase items.

"""

from urllib.parse import quote, urlencode

from showcase.models import HomeShowcaseItem
from showcase.selector import CORPORATE, COSPLAY
from titles import to_title_case
from utils.dates import format_month_label

TYPE_LABELS = {
    COSPLAY: 'Cosplay set',
    CORPORATE: 'Corporate event',
}

DEFAULT_CATEGORY_LABELS = {
    COSPLAY: 'Cosplay',
    CORPORATE: 'Corporate',
}


def build_set_gallery_url(slug, set_type, set_gallery_path='/set-gallery'):
    """Deep link into the set viewer, e.g. /set-gallery?set=neon&type=cosplay."""
    if not slug:
        return set_gallery_path
    query = urlencode({'set': slug, 'type': set_type or COSPLAY}, quote_via=quote)
    return f"{set_gallery_path}?{query}"


def build_descriptor(candidate):
    """'<category> · <Mon YYYY>', leaving out whichever part is empty."""
    category = (candidate.category or '').strip() or DEFAULT_CATEGORY_LABELS.get(candidate.type, 'Cosplay')
    parts = [category, format_month_label(candidate.iso_date)]
    return ' · '.join(p for p in parts if p)


def build_showcase_items(candidates, set_gallery_path='/set-gallery'):
    items = []
    for candidate in candidates:
        cover = candidate.cover_image
        thumbnail = cover.thumbnail or cover.full
        full = cover.full or cover.thumbnail
        if not thumbnail or not full:
            continue
        items.append(HomeShowcaseItem(
            title=candidate.title or to_title_case(candidate.slug),
            description=build_descriptor(candidate),
            thumbnail=thumbnail,
            full=full,
            href=build_set_gallery_url(candidate.slug, candidate.type, set_gallery_path),
            label=TYPE_LABELS.get(candidate.type, TYPE_LABELS[COSPLAY]),
            date=candidate.iso_date,
            type=candidate.type or COSPLAY,
        ))
    return items
