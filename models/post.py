"""
models/post.py
--------------
Domain model for blog posts.
"""

from dataclasses import dataclass
from typing import Optional

from models.record import Record, optional_int, text


@dataclass
class Post(Record):
    """
    Represents a row of the `posts` table.

    Attributes:
        id: Database primary key (None for new records).
        title: Unique post title.
        body: Post content.
        user_id: Author id; None once the author is deleted.
    """
    id: Optional[int] = None
    title: str = ""
    body: str = ""
    user_id: Optional[int] = None

    _coercers = {
        "id": optional_int,
        "title": text,
        "body": text,
        "user_id": optional_int,
    }

    def __str__(self) -> str:
        return f"Post #{self.id} '{self.title}' by user {self.user_id}"
