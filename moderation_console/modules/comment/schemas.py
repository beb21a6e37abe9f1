"""Pydantic schemas for comment endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Body of ``POST /comment``.

    A ``parentId`` turns the comment into a reply to that thread.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    parent_id: Optional[str] = Field(default=None, alias="parentId")


class CommentDeleteResponse(BaseModel):
    """Body returned after a successful delete."""

    id: str
    deleted: str
