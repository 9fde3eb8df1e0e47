"""
models/comment.py
-----------------
Domain model for comments on posts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.record import Record, optional_int, text, timestamp


@dataclass
class Comment(Record):
    """
    Represents a row of the `comments` table.

    Attributes:
        id: Database primary key (None for new records).
        date: Creation time, assigned by the database on insert.
        body: Comment text.
        user_id: Author id; None once the author is deleted.
        post_id: The commented post. Deleting the post deletes the comment.
    """
    id: Optional[int] = None
    date: Optional[datetime] = None
    body: str = ""
    user_id: Optional[int] = None
    post_id: Optional[int] = None

    _coercers = {
        "id": optional_int,
        "date": timestamp,
        "body": text,
        "user_id": optional_int,
        "post_id": optional_int,
    }

    def __str__(self) -> str:
        return f"Comment #{self.id} on post {self.post_id} by user {self.user_id} at {self.date}"
