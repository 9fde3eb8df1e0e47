"""
stores/ - Data Access Layer
===========================
One store per table. Each store owns the SQL for its table and maps
rows to model objects and database failures to the errors in db.errors.
"""

from stores.base import Storage
from stores.comment_store import CommentStore
from stores.post_store import PostStore
from stores.user_store import UserStore

__all__ = ["Storage", "UserStore", "PostStore", "CommentStore"]
