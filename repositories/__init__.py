"""
repositories/ - Orchestration Layer
===================================
Each repository composes calls on a store into resource-level
operations and wraps store failures with operation context.
"""

from repositories.comment_repo import CommentRepository
from repositories.post_repo import PostRepository
from repositories.user_repo import UserRepository

__all__ = ["UserRepository", "PostRepository", "CommentRepository"]
