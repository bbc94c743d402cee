"""
Hauge API — Post Feed Route
============================

GET /posts: every post joined with its author, newest first. Unauthenticated.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.post import PostWithUserResponse
from app.services.post_service import post_service

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get(
    "",
    response_model=List[PostWithUserResponse],
    responses={500: {"description": "Failed to fetch posts", "model": ErrorResponse}},
    summary="Get all posts with author info",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)) -> List[PostWithUserResponse]:
    return await post_service.list_posts_with_user(db)
