"""
repositories/post_repo.py
-------------------------
Repository for posts.
"""

from repositories.base import CrudRepository


class PostRepository(CrudRepository):
    resource = "post"
