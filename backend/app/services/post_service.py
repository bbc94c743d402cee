"""
Hauge API — Post Service
=========================

What:  Read-only post queries, newest first.
Who:   app.routes.posts (feed) and app.routes.users (per-user listings).

Queries:
    list_posts_for_user            posts WHERE user_id = :id
    list_posts_with_user_for_user  posts JOIN users WHERE users.id = :id
    list_posts_with_user           posts JOIN users (all)

An id outside the key range has no posts; it is answered without a query.
"""

import logging
from typing import List, Optional

from sqlalchemy import Select, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import id_in_range
from app.exceptions import DatabaseError
from app.models import Post, User
from app.schemas.post import PostResponse, PostWithUserResponse

logger = logging.getLogger(__name__)


def _posts_with_user_query(user_id: Optional[int] = None) -> Select:
    query = (
        select(
            Post.id,
            Post.title,
            Post.content,
            Post.user_id,
            Post.created_at,
            User.username,
            User.email,
        )
        .join(User, Post.user_id == User.id)
        .order_by(desc(Post.created_at), desc(Post.id))
    )
    if user_id is not None:
        query = query.where(User.id == user_id)
    return query


class PostService:
    """Stateless query helpers for posts."""

    async def list_posts_for_user(
        self, db: AsyncSession, user_id: int
    ) -> List[PostResponse]:
        if not id_in_range(user_id):
            return []
        try:
            result = await db.execute(
                select(Post)
                .where(Post.user_id == user_id)
                .order_by(desc(Post.created_at), desc(Post.id))
            )
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error fetching posts for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to fetch user posts",
                context={"user_id": user_id},
            )
        return [PostResponse.model_validate(post) for post in posts]

    async def list_posts_with_user_for_user(
        self, db: AsyncSession, user_id: int
    ) -> List[PostWithUserResponse]:
        return await self._fetch_with_user(db, user_id)

    async def list_posts_with_user(self, db: AsyncSession) -> List[PostWithUserResponse]:
        return await self._fetch_with_user(db, None)

    async def _fetch_with_user(
        self, db: AsyncSession, user_id: Optional[int]
    ) -> List[PostWithUserResponse]:
        if user_id is not None and not id_in_range(user_id):
            return []
        try:
            result = await db.execute(_posts_with_user_query(user_id))
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error("Database error fetching posts (user=%s): %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to fetch posts",
                context={"user_id": user_id},
            )
        return [PostWithUserResponse.model_validate(dict(row)) for row in rows]


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
