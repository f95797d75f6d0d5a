"""
Showcase router: home page selection and set viewer lookup.

"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.config import get_gallery_config, get_images_dir
from showcase import SET_TYPES, HomeShowcaseItem, SetView, load_home_items, load_set_view, run_sync

router = APIRouter(prefix="/api", tags=["showcase"])


@router.get("/home", response_model=list[HomeShowcaseItem])
async def home_showcase(
    images_dir: str = Depends(get_images_dir),
    config: dict = Depends(get_gallery_config),
):
    """Featured sets for the home page, newest first."""
    return await load_home_items(images_dir, config)


@router.get("/sets/{set_type}", response_model=SetView)
async def featured_set(
    set_type: str,
    slug: Optional[str] = Query(None, alias="set"),
    images_dir: str = Depends(get_images_dir),
    config: dict = Depends(get_gallery_config),
):
    """Resolve a featured set for the set viewer, defaulting to the first set."""
    if set_type not in SET_TYPES:
        raise HTTPException(status_code=422, detail=f"Unknown set type: {set_type}")

    view = await run_sync(load_set_view, images_dir, set_type, slug, config)
    if view is None:
        raise HTTPException(status_code=404, detail="No featured sets available yet")
    return view
