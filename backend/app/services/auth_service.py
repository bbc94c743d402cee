"""
Hauge API — Auth Service
=========================

What:  Account registration and password login, both ending in a bearer token.
How:   Register: uniqueness check → hash → insert → issue token.
       Login:    look up by email → verify hash → issue token.
Who:   app.routes.auth.

Failed logins use one message whether the email or the password was wrong.
"""

import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthenticationError, ConflictError, DatabaseError
from app.models import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserResponse
from app.services.passwords import hash_password, verify_password
from app.services.token_codec import TokenCodec

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:
    """Stateless; the codec is passed in per call from app.state."""

    async def register(
        self, db: AsyncSession, codec: TokenCodec, data: RegisterRequest
    ) -> AuthResponse:
        try:
            existing = await db.execute(
                select(User.id).where(
                    or_(User.email == data.email, User.username == data.username)
                )
            )
            if existing.first() is not None:
                raise ConflictError()

            user = User(
                username=data.username,
                email=data.email,
                password_hash=hash_password(data.password),
            )
            db.add(user)
            await db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            raise ConflictError(context={"error_type": type(e).__name__})
        except SQLAlchemyError as e:
            logger.error("Database error during registration: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("User registered: id=%s", user.id)
        return AuthResponse(
            token=codec.issue(user.id),
            user=UserResponse(id=user.id, username=user.username, email=user.email),
        )

    async def login(
        self, db: AsyncSession, codec: TokenCodec, data: LoginRequest
    ) -> AuthResponse:
        user = await self._find_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash or ""):
            logger.info("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        logger.info("User logged in: id=%s", user.id)
        return AuthResponse(
            token=codec.issue(user.id),
            user=UserResponse.model_validate(user),
        )

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error during login: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})


# ── Singleton Instance ────────────────────────────────────────────────────
auth_service = AuthService()
