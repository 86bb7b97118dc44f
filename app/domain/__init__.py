"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  author.py  — blog authors
  post.py    — posts and their tags
  user.py    — admin accounts used for JWT login
  mixins.py  — shared UUID primary key and timestamp columns
"""

from app.domain.author import Author
from app.domain.post import Post, PostTag
from app.domain.user import User

__all__ = [
    "Author",
    "Post",
    "PostTag",
    "User",
]
