"""
Manifest writing and the generator run.

One pass per category: the flat manifest at images/<category>/manifest.json
and the featured-set manifest at images/<category>/featured/manifest.json.
"""

import json
import os

from manifests.category import build_category_manifest
from manifests.featured import build_featured_manifest
from manifests.models import manifest_to_dict
from scanning import IMAGE_EXTENSIONS, list_subdirectories

MANIFEST_NAME = 'manifest.json'


class ImagesDirNotFound(Exception):
    """The root images directory does not exist."""

    def __init__(self, images_dir):
        super().__init__(f"Images directory not found: {images_dir}")
        self.images_dir = images_dir


class GenerationReport:
    """Per-category counts and failures of one generator run."""

    def __init__(self):
        self.categories = {}
        self.failures = {}

    def add(self, category, image_count, set_count):
        self.categories[category] = {'images': image_count, 'sets': set_count}

    def fail(self, category, error):
        self.failures[category] = str(error)

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0


def _write_json(path, payload):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def write_manifest(images_dir, category, manifest):
    path = os.path.join(images_dir, category, MANIFEST_NAME)
    return _write_json(path, manifest_to_dict(manifest))


def write_featured_manifest(images_dir, category, manifest):
    featured_dir = os.path.join(images_dir, category, 'featured')
    os.makedirs(featured_dir, exist_ok=True)
    return _write_json(os.path.join(featured_dir, MANIFEST_NAME), manifest_to_dict(manifest))


def list_categories(images_dir):
    return list_subdirectories(images_dir)


def generate_all(images_dir, url_prefix='/images', categories=None,
                 extensions=IMAGE_EXTENSIONS, inferencer=None, verbose=True):
    """Regenerate every manifest under images_dir.

    Args:
        images_dir: Root images directory (one subdirectory per category)
        url_prefix: Root-relative URI prefix for image paths
        categories: Optional subset of category names to process
        extensions: Accepted lower-case image extensions
        inferencer: Optional TitleInferencer (defaults to the built-in table)
        verbose: If True, print one line per written manifest

    Returns:
        GenerationReport

    Raises:
        ImagesDirNotFound: If images_dir does not exist
    """
    if not os.path.isdir(images_dir):
        raise ImagesDirNotFound(images_dir)

    report = GenerationReport()
    found = list_categories(images_dir)
    if categories:
        wanted = set(categories)
        found = [c for c in found if c in wanted]

    if not found:
        if verbose:
            print(f"No gallery categories found in {images_dir}")
        return report

    root = os.path.dirname(os.path.abspath(images_dir))
    for category in found:
        try:
            manifest = build_category_manifest(images_dir, category, url_prefix, extensions, inferencer)
            manifest_path = write_manifest(images_dir, category, manifest)
            if verbose:
                print(f"✓ Generated {manifest.count} entries for {category} → {os.path.relpath(manifest_path, root)}")

            featured = build_featured_manifest(images_dir, category, url_prefix, extensions, inferencer)
            featured_path = write_featured_manifest(images_dir, category, featured)
            if verbose:
                print(f"✓ Generated {featured.count} featured sets for {category} → {os.path.relpath(featured_path, root)}")
        except OSError as e:
            print(f"✗ Failed to write manifests for {category}: {e}")
            report.fail(category, e)
            continue
        report.add(category, manifest.count, featured.count)

    return report
