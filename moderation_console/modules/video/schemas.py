"""Pydantic schemas for video endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VideoUpdate(BaseModel):
    """Body of ``PUT /video``."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., max_length=100)
    description: str = Field(default="", max_length=5000)
    category_id: Optional[str] = Field(default=None, alias="categoryId")
