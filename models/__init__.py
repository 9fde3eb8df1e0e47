"""
models/ - Domain Models
=======================
Plain dataclasses for the three blog records. Field names match the
table columns and the JSON keys used by the HTTP layer.
"""

from models.comment import Comment
from models.post import Post
from models.user import User

__all__ = ["User", "Post", "Comment"]
