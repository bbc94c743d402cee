"""
Hauge API — Post Response Schemas
==================================

Posts are read-only through the API, so only response models exist.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostResponse(BaseModel):
    """
    What:  A single post.
    Who:   GET /users/{id}/posts.
    """

    id: int = Field(description="Post identifier")
    title: str
    content: str
    user_id: int = Field(description="Identifier of the owning user")
    created_at: datetime = Field(description="When the post was created (UTC)")

    model_config = ConfigDict(from_attributes=True)


class PostWithUserResponse(PostResponse):
    """
    What:  A post joined with its author's public fields.
    Who:   GET /posts and GET /users/{id}/posts-with-user.
    """

    username: str = Field(description="Author's username")
    email: str = Field(description="Author's email")
