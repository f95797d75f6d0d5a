"""
Featured-set maintenance for Folio.

Normalises each category before manifest generation: loose images are moved
into full/, thumbnails are re-rendered into thumbnails/, and every featured
set's meta.json sidecar is upserted with derived defaults.
"""

import logging
import os

from tqdm import tqdm

from manifests.sidecar import upsert_sidecar
from scanning import IMAGE_EXTENSIONS, list_image_files, list_subdirectories, newest_timestamp
from utils.dates import now_iso, timestamp_to_iso
from utils.image_transforms import generate_thumbnail_file


class ThumbnailSettings:
    """Thumbnail rendering options from the 'thumbnails' config section."""

    def __init__(self, config=None, enabled=True):
        config = config or {}
        self.target_edge = config.get('target_edge_px', 1100)
        self.jpeg_quality = config.get('jpeg_quality', 82)
        self.webp_quality = config.get('webp_quality', 82)
        self.enabled = enabled


def ensure_layout(base_dir):
    """Create base_dir/full and base_dir/thumbnails. Returns both paths."""
    full_dir = os.path.join(base_dir, 'full')
    thumb_dir = os.path.join(base_dir, 'thumbnails')
    os.makedirs(full_dir, exist_ok=True)
    os.makedirs(thumb_dir, exist_ok=True)
    return full_dir, thumb_dir


def move_loose_images(base_dir, full_dir, extensions=IMAGE_EXTENSIONS):
    """Move image files sitting directly in base_dir into full_dir."""
    moved = []
    for name in list_image_files(base_dir, extensions):
        os.replace(os.path.join(base_dir, name), os.path.join(full_dir, name))
        moved.append(name)
    return moved


def generate_thumbnails(full_dir, thumb_dir, settings, extensions=IMAGE_EXTENSIONS, desc=None):
    """Render a thumbnail for every image in full_dir.

    Images Pillow cannot decode or encode are logged and skipped.

    Returns:
        list: Filenames whose thumbnails were written
    """
    if not settings.enabled:
        return []

    written = []
    names = list_image_files(full_dir, extensions)
    for name in tqdm(names, desc=desc, unit='img', leave=False, disable=not names):
        try:
            generate_thumbnail_file(
                os.path.join(full_dir, name),
                os.path.join(thumb_dir, name),
                target_edge=settings.target_edge,
                jpeg_quality=settings.jpeg_quality,
                webp_quality=settings.webp_quality,
            )
        except (OSError, ValueError, KeyError) as e:
            logging.warning(f"Thumbnail generation failed for {os.path.join(full_dir, name)}: {e}")
            continue
        written.append(name)
    return written


def process_category_root(images_dir, category, settings, extensions=IMAGE_EXTENSIONS, verbose=True):
    """Normalise images/<category>/ itself. Returns None for an empty category."""
    category_dir = os.path.join(images_dir, category)
    full_dir, thumb_dir = ensure_layout(category_dir)

    moved = move_loose_images(category_dir, full_dir, extensions)
    thumbs = generate_thumbnails(full_dir, thumb_dir, settings, extensions, desc=category)
    image_count = len(list_image_files(full_dir, extensions))

    if not image_count and not thumbs and not moved:
        return None

    if verbose:
        extra = f", {len(moved)} files reorganised" if moved else ''
        print(f"✓ {category}: {len(thumbs)} gallery thumbnails refreshed{extra}")
    return {'category': category, 'thumbnails': len(thumbs), 'moved': moved}


def process_set(images_dir, category, set_slug, settings, extensions=IMAGE_EXTENSIONS):
    """Normalise one featured set and upsert its sidecar."""
    set_dir = os.path.join(images_dir, category, 'featured', set_slug)
    full_dir, thumb_dir = ensure_layout(set_dir)

    moved = move_loose_images(set_dir, full_dir, extensions)
    thumbs = generate_thumbnails(full_dir, thumb_dir, settings, extensions, desc=f"{category}/{set_slug}")

    image_names = sorted(list_image_files(full_dir, extensions))
    fallback_date = timestamp_to_iso(newest_timestamp(full_dir, image_names)) or now_iso()
    meta = upsert_sidecar(set_dir, set_slug, category, image_names, fallback_date)

    return {'set': set_slug, 'thumbnails': len(thumbs), 'moved': moved, 'meta': meta}


def process_category(images_dir, category, settings, extensions=IMAGE_EXTENSIONS, verbose=True):
    """Process every featured set of a category, in name order."""
    featured_dir = os.path.join(images_dir, category, 'featured')
    results = []
    for set_slug in sorted(list_subdirectories(featured_dir)):
        result = process_set(images_dir, category, set_slug, settings, extensions)
        results.append(result)
        if verbose:
            extra = f", {len(result['moved'])} files reorganised" if result['moved'] else ''
            print(f"✓ {category}/{set_slug}: {result['thumbnails']} thumbnails refreshed{extra}")
    return results


def process_all(images_dir, settings, categories=None, extensions=IMAGE_EXTENSIONS, verbose=True):
    """Run the maintenance pass over every category.

    Returns:
        dict: category -> list of per-set results

    Raises:
        FileNotFoundError: If no categories exist under images_dir
    """
    found = list_subdirectories(images_dir)
    if categories:
        wanted = set(categories)
        found = [c for c in found if c in wanted]
    if not found:
        raise FileNotFoundError(f"No image categories found under {images_dir}")

    results = {}
    for category in found:
        process_category_root(images_dir, category, settings, extensions, verbose)
        results[category] = process_category(images_dir, category, settings, extensions, verbose)

    if verbose:
        print("\nAll featured sets processed.")
    return results
