"""Pydantic models for gallery manifests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ImageRecord(BaseModel):
    slug: str
    title: str
    description: str = ''
    thumbnail: str
    full: str


class CategoryManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str
    generated_at: str = Field(alias='generatedAt')
    images: list[ImageRecord] = []

    @computed_field
    @property
    def count(self) -> int:
        return len(self.images)


class FeaturedSet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slug: str
    title: str
    description: str = ''
    category: str = ''
    date: Optional[str] = None
    cover_image: Optional[ImageRecord] = Field(default=None, alias='coverImage')
    images: list[ImageRecord] = []

    @computed_field
    @property
    def count(self) -> int:
        return len(self.images)


class FeaturedSetManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str
    generated_at: str = Field(alias='generatedAt')
    sets: list[FeaturedSet] = []

    @computed_field
    @property
    def count(self) -> int:
        return len(self.sets)


def manifest_to_dict(manifest: BaseModel) -> dict:
    """Serialize a manifest with its JSON (camelCase) field names."""
    return manifest.model_dump(mode='json', by_alias=True)
