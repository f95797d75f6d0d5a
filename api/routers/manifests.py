"""
Manifests router: serve generated manifest JSON.

"""

import os

from fastapi import APIRouter, Depends, HTTPException

from api.config import get_images_dir
from manifests import MANIFEST_NAME
from scanning import read_json_safe
from showcase import run_sync

router = APIRouter(prefix="/api", tags=["manifests"])


def _safe_category(category: str) -> str:
    if not category or category in ('.', '..') or '/' in category or '\\' in category:
        raise HTTPException(status_code=404, detail="Manifest not found")
    return category


async def _read_manifest(path: str) -> dict:
    manifest = await run_sync(read_json_safe, path)
    if not isinstance(manifest, dict):
        raise HTTPException(status_code=404, detail="Manifest not found")
    return manifest


@router.get("/manifests/{category}")
async def category_manifest(category: str, images_dir: str = Depends(get_images_dir)):
    """Flat gallery manifest of a category."""
    category = _safe_category(category)
    return await _read_manifest(os.path.join(images_dir, category, MANIFEST_NAME))


@router.get("/featured/{category}")
async def featured_manifest(category: str, images_dir: str = Depends(get_images_dir)):
    """Featured-set manifest of a category."""
    category = _safe_category(category)
    return await _read_manifest(os.path.join(images_dir, category, 'featured', MANIFEST_NAME))
