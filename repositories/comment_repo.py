"""
repositories/comment_repo.py
----------------------------
Repository for comments.
"""

from repositories.base import CrudRepository


class CommentRepository(CrudRepository):
    resource = "comment"
