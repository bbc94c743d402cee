"""
Hauge API — User Route Handlers
================================

What:  CRUD for /users plus the per-user post listings.
How:   Each handler composes, in order:
           authenticate (mutations only) → validate id → validate body
           → authorize ownership → service call
       PATCH is the exception: ownership is settled before the partial body
       is read, so a caller patching another account gets 403 whatever the
       payload.
       Every step raises an app exception on failure; the global handlers
       in main.py turn it into the JSON error response.

Route Inventory:
    POST   /users                       create (no auth)
    GET    /users                       list
    GET    /users/{id}                  detail
    PUT    /users/{id}                  replace      (bearer + owner)
    PATCH  /users/{id}                  partial      (bearer + owner)
    DELETE /users/{id}                  delete       (bearer + owner)
    GET    /users/{id}/posts            user's posts, newest first
    GET    /users/{id}/posts-with-user  user's posts with author fields
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import read_json_body, require_auth
from app.schemas.common import ErrorResponse
from app.schemas.post import PostResponse, PostWithUserResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.authorization import AuthContext, ensure_owner
from app.services.post_service import post_service
from app.services.user_service import user_service
from app.services.validation import (
    validate_partial_user_data,
    validate_required_user_data,
    validate_user_id,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

_user_body = {
    "required": True,
    "content": {"application/json": {"schema": UserCreate.model_json_schema()}},
}
_partial_user_body = {
    "required": False,
    "content": {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {
                    "username": {"type": "string", "minLength": 2, "maxLength": 50},
                    "email": {"type": "string", "format": "email"},
                },
            }
        }
    },
}

_errors = {
    400: {"description": "Validation failed", "model": ErrorResponse},
    500: {"description": "Internal server error", "model": ErrorResponse},
}
_auth_errors = {
    401: {"description": "Missing or malformed bearer token", "model": ErrorResponse},
    403: {"description": "Invalid token, or not the account owner", "model": ErrorResponse},
}
_not_found = {404: {"description": "User not found", "model": ErrorResponse}}


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={**_errors, 409: {"description": "Email already in use", "model": ErrorResponse}},
    summary="Create a new user",
    openapi_extra={"requestBody": _user_body},
)
async def create_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    data = validate_required_user_data(await read_json_body(request)).unwrap()
    return await user_service.create_user(db, data)


@router.get(
    "",
    response_model=List[UserResponse],
    responses={500: _errors[500]},
    summary="Get all users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_users(db)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_errors, **_not_found},
    summary="Get a user by ID",
)
async def get_user(
    user_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    target_id = validate_user_id(user_id).unwrap()
    return await user_service.get_user(db, target_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_errors, **_auth_errors, **_not_found},
    summary="Replace a user by ID",
    openapi_extra={"requestBody": _user_body},
)
async def replace_user(
    user_id: str,
    request: Request,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    target_id = validate_user_id(user_id).unwrap()
    data = validate_required_user_data(await read_json_body(request)).unwrap()
    ensure_owner(auth, target_id)
    return await user_service.replace_user(db, target_id, data)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_errors, **_auth_errors, **_not_found},
    summary="Partially update a user by ID",
    openapi_extra={"requestBody": _partial_user_body},
)
async def patch_user(
    user_id: str,
    request: Request,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    target_id = validate_user_id(user_id).unwrap()
    ensure_owner(auth, target_id)
    data = validate_partial_user_data(await read_json_body(request)).unwrap()
    return await user_service.update_user(db, target_id, data)


@router.delete(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    responses={**_errors, **_auth_errors, **_not_found},
    summary="Delete a user by ID",
)
async def delete_user(
    user_id: str,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    target_id = validate_user_id(user_id).unwrap()
    ensure_owner(auth, target_id)
    await user_service.delete_user(db, target_id)
    return Response(status_code=204)


@router.get(
    "/{user_id}/posts",
    response_model=List[PostResponse],
    responses=_errors,
    summary="Get posts for a user",
)
async def list_user_posts(
    user_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    target_id = validate_user_id(user_id).unwrap()
    return await post_service.list_posts_for_user(db, target_id)


@router.get(
    "/{user_id}/posts-with-user",
    response_model=List[PostWithUserResponse],
    responses=_errors,
    summary="Get posts for a user with author info",
)
async def list_user_posts_with_user(
    user_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[PostWithUserResponse]:
    target_id = validate_user_id(user_id).unwrap()
    return await post_service.list_posts_with_user_for_user(db, target_id)
