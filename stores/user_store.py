"""
stores/user_store.py
--------------------
SQL for the `users` table. Passwords are hashed by pgcrypto on the
way in, both on insert and when an update changes them.
"""

from models.user import User
from stores.base import TableStore

HASH_PASSWORD = "crypt(%s, gen_salt('bf', 8))"


class UserStore(TableStore):
    """Store for the users table."""

    table = "users"
    resource = "user"
    model = User
    insert_sql = f"""
        INSERT INTO users (username, password, first_name, last_name, email, is_active)
        VALUES (%s, {HASH_PASSWORD}, %s, %s, %s, %s)
        RETURNING id;
    """
    update_placeholders = {"password": HASH_PASSWORD}

    def insert_params(self, user: User) -> tuple:
        return (
            user.username, user.password, user.first_name,
            user.last_name, user.email, user.is_active,
        )
