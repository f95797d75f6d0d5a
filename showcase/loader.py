"""
View-time manifest loading for the home showcase and set viewer.

Manifests are read from the images directory. Every load degrades to an
empty result so a missing or broken manifest never breaks a page.
"""

import asyncio
import logging
import os
import posixpath
from functools import partial

from pydantic import ValidationError

from manifests.models import FeaturedSet
from manifests.writer import MANIFEST_NAME
from scanning import read_json_safe
from showcase.items import build_showcase_items
from showcase.models import HomeShowcaseItem, SetView
from showcase.selector import CORPORATE, COSPLAY, DEFAULT_LIMIT, select_for_home

SET_TYPES = (COSPLAY, CORPORATE)

_DEFAULT_SET_CATEGORIES = {
    COSPLAY: 'Cosplay Series',
    CORPORATE: 'Corporate Events',
}


async def run_sync(fn, *args, **kwargs):
    """Run a synchronous function in the default executor."""
    loop = asyncio.get_event_loop()
    if kwargs:
        return await loop.run_in_executor(None, partial(fn, *args, **kwargs))
    return await loop.run_in_executor(None, partial(fn, *args))


def featured_manifest_path(images_dir, set_type):
    return os.path.join(images_dir, set_type, 'featured', MANIFEST_NAME)


def _with_image_fallbacks(image):
    """Fill a missing thumbnail from full (and full from thumbnail).

    Hand-made manifests may also leave out slug and title; the slug then
    comes from the image filename.
    """
    if not isinstance(image, dict):
        return image
    thumbnail = image.get('thumbnail') or image.get('full')
    full = image.get('full') or image.get('thumbnail')
    slug = image.get('slug') or posixpath.splitext(posixpath.basename(full or ''))[0]
    return {**image, 'slug': slug, 'title': image.get('title') or '',
            'thumbnail': thumbnail, 'full': full}


def _normalise_set_entry(entry):
    if not isinstance(entry, dict):
        return entry
    entry = dict(entry)
    for key in ('coverImage', 'cover_image'):
        if entry.get(key) is not None:
            entry[key] = _with_image_fallbacks(entry[key])
    if isinstance(entry.get('images'), list):
        entry['images'] = [_with_image_fallbacks(image) for image in entry['images']]
    return entry


def load_featured_sets(images_dir, set_type):
    """Featured sets of one category, [] when the manifest is unusable."""
    path = featured_manifest_path(images_dir, set_type)
    manifest = read_json_safe(path)
    if not isinstance(manifest, dict) or not isinstance(manifest.get('sets'), list):
        logging.warning(f"Featured manifest unavailable for {set_type}: {path}")
        return []

    sets = []
    for entry in manifest['sets']:
        try:
            sets.append(FeaturedSet.model_validate(_normalise_set_entry(entry)))
        except ValidationError as e:
            logging.warning(f"Skipping malformed featured set in {path}: {e.error_count()} errors")
    return sets


def load_category_images(images_dir, category):
    """Images of a flat category manifest, [] when unusable."""
    path = os.path.join(images_dir, category, MANIFEST_NAME)
    manifest = read_json_safe(path)
    images = manifest.get('images') if isinstance(manifest, dict) else None
    if not isinstance(images, list):
        logging.warning(f"Gallery manifest unavailable for {category}: {path}")
        return []
    return [image for image in images if isinstance(image, dict)]


def _fallback_home_items(config):
    items = []
    for entry in config.get('fallbacks', {}).get('home', []):
        try:
            items.append(HomeShowcaseItem.model_validate(entry))
        except ValidationError:
            continue
    return items


async def load_home_items(images_dir, config=None):
    """Showcase items for the home page.

    Both featured manifests load concurrently. With no usable sets the flat
    home manifest is used, and after that the configured fallback images.
    """
    config = config or {}
    showcase = config.get('showcase', {})
    limit = showcase.get('limit', DEFAULT_LIMIT)

    cosplay_sets, corporate_sets = await asyncio.gather(
        run_sync(load_featured_sets, images_dir, COSPLAY),
        run_sync(load_featured_sets, images_dir, CORPORATE),
    )

    selection = select_for_home(cosplay_sets, corporate_sets, limit)
    items = build_showcase_items(selection, showcase.get('set_gallery_path', '/set-gallery'))
    if items:
        return items

    home_images = await run_sync(load_category_images, images_dir, 'home')
    items = []
    for image in home_images:
        try:
            items.append(HomeShowcaseItem.model_validate(image))
        except ValidationError:
            continue
    if items:
        return items

    return _fallback_home_items(config)


def _fallback_sets(config, set_type):
    sets = []
    for entry in config.get('fallbacks', {}).get('sets', {}).get(set_type, []):
        try:
            sets.append(FeaturedSet.model_validate(entry))
        except ValidationError:
            continue
    return sets


def resolve_set(sets, slug, set_type, fallback_sets=None):
    """Pick the set to show in the set viewer.

    Manifest sets are used when there are any, otherwise fallback_sets. The
    set matching slug wins; an unknown or missing slug gets the first set.

    Returns:
        SetView or None when there is nothing to show
    """
    candidates = list(sets) if sets else list(fallback_sets or [])
    if not candidates:
        return None

    match = next((s for s in candidates if slug and s.slug == slug), None)
    chosen = match or candidates[0]
    if match is None:
        logging.info(f"Set not found for slug {slug!r}, defaulting to {chosen.slug!r}")

    return SetView(
        slug=chosen.slug,
        title=chosen.title or 'Featured Collection',
        description=chosen.description or '',
        category=chosen.category or _DEFAULT_SET_CATEGORIES.get(set_type, 'Cosplay Series'),
        type=set_type,
        images=list(chosen.images),
        requested=slug,
        fallback=match is None,
    )


def load_set_view(images_dir, set_type, slug, config=None):
    """Load a category's featured sets and resolve slug against them."""
    config = config or {}
    return resolve_set(
        load_featured_sets(images_dir, set_type),
        slug,
        set_type,
        _fallback_sets(config, set_type),
    )
