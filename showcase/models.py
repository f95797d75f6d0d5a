"""Pydantic models for the home showcase and set viewer."""

from typing import Optional

from pydantic import BaseModel

from manifests.models import ImageRecord


class CoverImage(BaseModel):
    slug: Optional[str] = None
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    full: Optional[str] = None


class ShowcaseCandidate(BaseModel):
    slug: str = ''
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    cover_image: CoverImage
    iso_date: Optional[str] = None
    timestamp: int = 0
    type: str


class HomeShowcaseItem(BaseModel):
    title: str
    description: str = ''
    thumbnail: str
    full: str
    href: Optional[str] = None
    label: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None


class SetView(BaseModel):
    slug: str
    title: str
    description: str = ''
    category: str
    type: str
    images: list[ImageRecord] = []
    requested: Optional[str] = None
    fallback: bool = False
