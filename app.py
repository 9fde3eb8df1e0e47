"""
app.py
------
Flask application factory. Wires stores into repositories and
repositories into the HTTP blueprints.
"""

from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from handlers.default_handler import default_bp
from handlers.resource_handler import resource_blueprint
from models import Comment, Post, User
from repositories import CommentRepository, PostRepository, UserRepository
from stores import CommentStore, PostStore, Storage, UserStore
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(
    user_store: Optional[Storage] = None,
    post_store: Optional[Storage] = None,
    comment_store: Optional[Storage] = None,
    config: Optional[dict] = None,
) -> Flask:
    """
    Build the Flask application.

    Stores default to the PostgreSQL-backed ones; tests pass in-memory
    doubles instead.
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    if config:
        app.config.update(config)

    users = UserRepository(user_store or UserStore())
    posts = PostRepository(post_store or PostStore())
    comments = CommentRepository(comment_store or CommentStore())

    app.register_blueprint(default_bp)
    app.register_blueprint(resource_blueprint("users", User, users))
    app.register_blueprint(resource_blueprint("posts", Post, posts))
    app.register_blueprint(resource_blueprint("comments", Comment, comments))

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"Unhandled error: {e}")
        return jsonify({"error": str(e)}), 500

    return app
