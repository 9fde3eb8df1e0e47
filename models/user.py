"""
models/user.py
--------------
Domain model for blog users.
"""

from dataclasses import dataclass
from typing import Optional

from models.record import Record, flag, optional_int, text


@dataclass
class User(Record):
    """
    Represents a row of the `users` table.

    Attributes:
        id: Database primary key (None for new records).
        username: Unique login name.
        password: Plain text on the way in, a bcrypt hash once stored.
        first_name: Given name.
        last_name: Family name.
        email: Contact address.
        is_active: Whether the account is enabled.
    """
    id: Optional[int] = None
    username: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    is_active: bool = False

    _coercers = {
        "id": optional_int,
        "username": text,
        "password": text,
        "first_name": text,
        "last_name": text,
        "email": text,
        "is_active": flag,
    }

    def __str__(self) -> str:
        status = "active" if self.is_active else "inactive"
        return f"User #{self.id} {self.username} <{self.email}> ({status})"
