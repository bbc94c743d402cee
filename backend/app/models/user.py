"""
Hauge API — User SQLAlchemy Model
==================================

What:  ORM model representing the `users` table.
Who:   Used by UserService and AuthService; read by Alembic for migrations.

Table Design:
    - Integer primary key assigned by the database
    - username: 2-50 characters, enforced by the request validators
    - email: unique; duplicate inserts surface as ConflictError (409)
    - password_hash: only set for accounts created through /auth/register;
      never serialized into API responses
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    """
    Represents an account in the database.

    Lifecycle:
        1. Created by POST /users (no password) or POST /auth/register
        2. Mutated by PUT / PATCH /users/{id} (owner only)
        3. Destroyed by DELETE /users/{id} (owner only); posts cascade
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Display name, 2-50 characters",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Login identifier; unique across accounts",
    )

    password_hash: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="passlib hash; NULL for accounts created without a password",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    posts: Mapped[List["Post"]] = relationship(  # noqa: F821
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
