"""
stores/post_store.py
--------------------
SQL for the `posts` table.
"""

from models.post import Post
from stores.base import TableStore


class PostStore(TableStore):
    """Store for the posts table."""

    table = "posts"
    resource = "post"
    model = Post
    insert_sql = """
        INSERT INTO posts (title, body, user_id)
        VALUES (%s, %s, %s)
        RETURNING id;
    """

    def insert_params(self, post: Post) -> tuple:
        return (post.title, post.body, post.user_id)
