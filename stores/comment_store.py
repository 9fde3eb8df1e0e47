"""
stores/comment_store.py
-----------------------
SQL for the `comments` table. The creation date is assigned by the
database and copied back onto the record after insert.
"""

from models.comment import Comment
from stores.base import TableStore


class CommentStore(TableStore):
    """Store for the comments table."""

    table = "comments"
    resource = "comment"
    model = Comment
    insert_sql = """
        INSERT INTO comments (body, user_id, post_id)
        VALUES (%s, %s, %s)
        RETURNING id, date;
    """

    def insert_params(self, comment: Comment) -> tuple:
        return (comment.body, comment.user_id, comment.post_id)

    def after_insert(self, comment: Comment, row: tuple) -> None:
        comment.date = row[1]
