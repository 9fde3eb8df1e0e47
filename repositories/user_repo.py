"""
repositories/user_repo.py
-------------------------
Repository for users.
"""

from repositories.base import CrudRepository


class UserRepository(CrudRepository):
    resource = "user"
