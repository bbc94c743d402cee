"""
Hauge API — Post SQLAlchemy Model
==================================

What:  ORM model representing the `posts` table.
Who:   Read by PostService. No API surface creates or mutates posts.

Query Patterns:
    - Feed: posts JOIN users ORDER BY created_at DESC
    - Per user: WHERE user_id = :id ORDER BY created_at DESC
    Both are served by the indexes declared below.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Post(Base):
    """A post written by a user. created_at is assigned on insert and never changes."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Every post references an existing user; deleting the user removes the posts
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    author: Mapped["User"] = relationship(back_populates="posts")  # noqa: F821

    __table_args__ = (
        Index("idx_posts_created_at", created_at.desc()),
        Index("idx_posts_user_id", user_id),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, user_id={self.user_id}, created_at='{self.created_at}')>"
