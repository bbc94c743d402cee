"""
Hauge API — User Service
=========================

What:  Storage operations behind the /users endpoints.
How:   Parameterized SQLAlchemy statements over the per-request session.
       "No row matched" becomes NotFoundError; unique-constraint violations
       become ConflictError; any other SQLAlchemy failure is logged and
       wrapped in DatabaseError so the client sees a generic 500.
Who:   Called by app.routes.users after validation and authorization.

The service is stateless. Commit/rollback belongs to get_db_session; the
service only flushes.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import id_in_range
from app.exceptions import ConflictError, DatabaseError, NotFoundError
from app.models import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


def _ensure_in_range(user_id: int) -> None:
    # An id no row can carry is simply absent
    if not id_in_range(user_id):
        raise NotFoundError(resource="user", resource_id=user_id)


class UserService:
    """
    Business logic layer for user accounts.

    Responsibilities:
        - create_user(): insert, return public representation
        - list_users() / get_user(): reads
        - replace_user() / update_user(): full and partial updates
        - delete_user(): removal
    """

    async def create_user(self, db: AsyncSession, data: UserCreate) -> UserResponse:
        user = User(username=data.username, email=data.email)
        try:
            db.add(user)
            await db.flush()  # assigns the id without committing
        except IntegrityError as e:
            logger.info("Rejected duplicate user email=%s", data.email)
            raise ConflictError(context={"error_type": type(e).__name__})
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("User created: id=%s", user.id)
        return UserResponse(id=user.id, username=user.username, email=user.email)

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        try:
            result = await db.execute(select(User).order_by(User.id))
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})
        return [UserResponse.model_validate(user) for user in users]

    async def get_user(self, db: AsyncSession, user_id: int) -> UserResponse:
        """
        Raises:
            NotFoundError: no user with this id (→ 404)
            DatabaseError: query failed (→ 500)
        """
        _ensure_in_range(user_id)
        try:
            result = await db.execute(select(User).where(User.id == user_id))
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, str(e))
            raise DatabaseError(context={"user_id": user_id})

        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return UserResponse.model_validate(user)

    async def replace_user(
        self, db: AsyncSession, user_id: int, data: UserCreate
    ) -> UserResponse:
        """
        PUT semantics: overwrite username and email.

        Returns the representation built from the payload; 404 when no row
        matched the id.
        """
        _ensure_in_range(user_id)
        try:
            result = await db.execute(
                update(User)
                .where(User.id == user_id)
                .values(username=data.username, email=data.email)
            )
        except IntegrityError as e:
            logger.info("Rejected duplicate email on replace of user %s", user_id)
            raise ConflictError(context={"user_id": user_id, "error_type": type(e).__name__})
        except SQLAlchemyError as e:
            logger.error("Database error updating user %s: %s", user_id, str(e), exc_info=True)
            raise DatabaseError(context={"user_id": user_id})

        if result.rowcount == 0:
            raise NotFoundError(resource="user", resource_id=user_id)

        logger.info("User replaced: id=%s", user_id)
        return UserResponse(id=user_id, username=data.username, email=data.email)

    async def update_user(
        self, db: AsyncSession, user_id: int, data: UserUpdate
    ) -> UserResponse:
        """
        PATCH semantics: write only the supplied fields, then re-fetch.

        With nothing supplied no UPDATE is issued; the current row is
        returned (or 404 if it does not exist).
        """
        _ensure_in_range(user_id)
        changes = data.changes()
        if changes:
            try:
                result = await db.execute(
                    update(User).where(User.id == user_id).values(**changes)
                )
            except IntegrityError as e:
                logger.info("Rejected duplicate email on patch of user %s", user_id)
                raise ConflictError(
                    context={"user_id": user_id, "error_type": type(e).__name__}
                )
            except SQLAlchemyError as e:
                logger.error(
                    "Database error patching user %s: %s", user_id, str(e), exc_info=True
                )
                raise DatabaseError(context={"user_id": user_id})

            if result.rowcount == 0:
                raise NotFoundError(resource="user", resource_id=user_id)
            logger.info("User patched: id=%s fields=%s", user_id, sorted(changes))

        return await self.get_user(db, user_id)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        _ensure_in_range(user_id)
        try:
            result = await db.execute(delete(User).where(User.id == user_id))
        except SQLAlchemyError as e:
            logger.error("Database error deleting user %s: %s", user_id, str(e), exc_info=True)
            raise DatabaseError(context={"user_id": user_id})

        if result.rowcount == 0:
            raise NotFoundError(resource="user", resource_id=user_id)
        logger.info("User deleted: id=%s", user_id)


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
