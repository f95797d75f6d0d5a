"""
Per-category manifest builder.

Images keep directory listing order, which differs across platforms.
Consumers use it as default display order only.
"""

import os

from manifests.models import CategoryManifest, ImageRecord
from scanning import IMAGE_EXTENSIONS, scan_images
from titles import infer_title
from utils.dates import now_iso


def image_uri(url_prefix, *parts):
    """Join a root-relative URI with forward slashes."""
    return '/'.join([url_prefix.rstrip('/')] + [p.strip('/') for p in parts])


def build_image_record(scanned, base_uri, category, inferencer=None):
    """ImageRecord for a scanned image under base_uri/{full,thumbnails}/."""
    full = f"{base_uri}/full/{scanned.filename}"
    thumbnail = f"{base_uri}/thumbnails/{scanned.thumbnail_name}" if scanned.thumbnail_name else full
    return ImageRecord(
        slug=scanned.slug,
        title=infer_title(scanned.filename, category, inferencer),
        description='',
        thumbnail=thumbnail,
        full=full,
    )


def build_category_manifest(images_dir, category, url_prefix='/images',
                            extensions=IMAGE_EXTENSIONS, inferencer=None):
    """Build the flat manifest for images/<category>/full."""
    category_dir = os.path.join(images_dir, category)
    scanned = scan_images(
        os.path.join(category_dir, 'full'),
        os.path.join(category_dir, 'thumbnails'),
        extensions,
    )
    base_uri = image_uri(url_prefix, category)
    images = [build_image_record(s, base_uri, category, inferencer) for s in scanned]
    return CategoryManifest(category=category, generated_at=now_iso(), images=images)
