"""
Hauge API — ORM Models
=======================

Importing this package registers every table with `Base.metadata`.
"""

from app.models.user import User
from app.models.post import Post

__all__ = ["User", "Post"]
