"""
Hauge API — Request Dependencies
=================================

What:  FastAPI dependencies shared by the route modules.
How:   The authentication dependency walks a fixed sequence per request;
       every failure is terminal and produces an immediate response:

    ┌──────────┐ no header      → 401 "Access token required"
    │ NoHeader │
    └────┬─────┘
    ┌────▼──────┐ not "Bearer " → 401 "Token must be in format: Bearer <token>"
    │ BadScheme │
    └────┬──────┘
    ┌────▼───┐   codec → None   → 403 "Invalid or expired token"
    │ Verify │
    └────┬───┘
    ┌────▼──────────┐
    │ Authenticated │ → AuthContext(user_id) passed to the handler
    └───────────────┘
"""

import json
import logging
from typing import Any

from fastapi import Request

from app.exceptions import AuthenticationError, ForbiddenError, ValidationError
from app.middleware.request_id import request_id_var
from app.services.authorization import AuthContext
from app.services.token_codec import TokenCodec

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_token_codec(request: Request) -> TokenCodec:
    """The codec built by create_app(); one per application."""
    return request.app.state.token_codec


def require_auth(request: Request) -> AuthContext:
    """Resolve the caller's identity from `Authorization: Bearer <token>`."""
    header = request.headers.get("Authorization")
    if not header:
        raise AuthenticationError("Access token required")

    if not header.startswith(BEARER_PREFIX):
        raise AuthenticationError("Token must be in format: Bearer <token>")

    token = header[len(BEARER_PREFIX):]
    user_id = get_token_codec(request).verify(token)
    if user_id is None:
        logger.info("[%s] Rejected bearer token", request_id_var.get(""))
        raise ForbiddenError("Invalid or expired token")

    return AuthContext(user_id=user_id)


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Shape checks belong to the validators; this only rejects bodies that are
    not JSON at all. An empty body reads as {}.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError(details=["Request body must be valid JSON"])
