"""
Folio manifests package.

Re-exports public API for manifest building, sidecar upserts and writing.
"""

from manifests.models import (
    ImageRecord, CategoryManifest, FeaturedSet, FeaturedSetManifest, manifest_to_dict,
)
from manifests.sidecar import (
    SIDECAR_NAME, merge_sidecar, build_sidecar_defaults,
    read_sidecar, serialize_sidecar, write_sidecar, upsert_sidecar,
)
from manifests.category import build_category_manifest, build_image_record, image_uri
from manifests.featured import build_featured_set, build_featured_manifest
from manifests.writer import (
    MANIFEST_NAME, ImagesDirNotFound, GenerationReport,
    write_manifest, write_featured_manifest, list_categories, generate_all,
)
