"""
Hauge API — Authentication Routes
==================================

What:  Public endpoints that hand out bearer tokens.
How:   Validate payload → AuthService → AuthResponse {token, user}.

Endpoints:
    POST /auth/register  create an account with a password (201)
    POST /auth/login     exchange email + password for a token (200)

Request bodies are never logged; they carry plaintext passwords.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_token_codec, read_json_body
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.common import ErrorResponse
from app.services.auth_service import auth_service
from app.services.token_codec import TokenCodec
from app.services.validation import validate_login, validate_registration

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    status_code=201,
    response_model=AuthResponse,
    responses={
        400: {"description": "Validation failed", "model": ErrorResponse},
        409: {"description": "Email or username already in use", "model": ErrorResponse},
    },
    summary="Register a new user",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": RegisterRequest.model_json_schema()}},
        }
    },
)
async def register(
    request: Request,
    codec: TokenCodec = Depends(get_token_codec),
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    data = validate_registration(await read_json_body(request)).unwrap()
    return await auth_service.register(db, codec, data)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"description": "Validation failed", "model": ErrorResponse},
        401: {"description": "Invalid email or password", "model": ErrorResponse},
    },
    summary="Authenticate and get a token",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}},
        }
    },
)
async def login(
    request: Request,
    codec: TokenCodec = Depends(get_token_codec),
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    data = validate_login(await read_json_body(request)).unwrap()
    return await auth_service.login(db, codec, data)
