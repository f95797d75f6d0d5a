"""
Featured-set manifest builder.

Each subdirectory of images/<category>/featured/ is one curated set with its
own full/ and thumbnails/ folders and an optional meta.json sidecar.
"""

import os

from manifests.category import build_image_record, image_uri
from manifests.models import FeaturedSet, FeaturedSetManifest
from manifests.sidecar import read_sidecar
from scanning import IMAGE_EXTENSIONS, list_subdirectories, newest_timestamp, scan_images
from titles import infer_title
from utils.dates import ensure_iso_date, now_iso, timestamp_to_iso


def _meta_text(meta, key):
    value = meta.get(key)
    return value if isinstance(value, str) and value else ''


def build_featured_set(images_dir, category, set_slug, url_prefix='/images',
                       extensions=IMAGE_EXTENSIONS, inferencer=None):
    """Build one FeaturedSet, or None when the set has no full-size images."""
    set_dir = os.path.join(images_dir, category, 'featured', set_slug)
    full_dir = os.path.join(set_dir, 'full')

    scanned = scan_images(full_dir, os.path.join(set_dir, 'thumbnails'), extensions)
    if not scanned:
        return None

    newest = newest_timestamp(full_dir, [s.filename for s in scanned])
    meta = read_sidecar(set_dir)
    date = ensure_iso_date(meta.get('date')) or timestamp_to_iso(newest)

    base_uri = image_uri(url_prefix, category, 'featured', set_slug)
    images = sorted(
        (build_image_record(s, base_uri, category, inferencer) for s in scanned),
        key=lambda image: image.slug,
    )

    return FeaturedSet(
        slug=set_slug,
        title=_meta_text(meta, 'title') or infer_title(set_slug, category, inferencer),
        description=_meta_text(meta, 'description'),
        category=_meta_text(meta, 'category'),
        date=date,
        cover_image=images[0] if images else None,
        images=images,
    )


def build_featured_manifest(images_dir, category, url_prefix='/images',
                            extensions=IMAGE_EXTENSIONS, inferencer=None):
    """Build the featured-set manifest for a category.

    Sets keep featured/ listing order; recency ordering is left to the
    showcase selector.
    """
    featured_dir = os.path.join(images_dir, category, 'featured')
    sets = []
    for set_slug in list_subdirectories(featured_dir):
        featured_set = build_featured_set(
            images_dir, category, set_slug, url_prefix, extensions, inferencer)
        if featured_set is not None:
            sets.append(featured_set)
    return FeaturedSetManifest(category=category, generated_at=now_iso(), sets=sets)
